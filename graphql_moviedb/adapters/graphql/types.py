"""
Types GraphQL (strawberry) du graphe TMDB.

Chaque type objet enveloppe la reponse REST normalisee dont il est issu
(attribut prive payload). Les champs scalaires sont copies depuis le payload
a la construction (from_payload) ; les champs composes et les champs de
detail sont des resolveurs qui lisent le payload, et completent l'objet par
un appel REST via get_field quand le champ n'y est pas encore.

Les unions (Media, SearchResult, Credit) sont resolues par le type Python de
l'objet, choisi par une table explicite MediaType -> classe (media_object).
"""

import dataclasses
from enum import Enum
from typing import Annotated, Any, Iterable, Mapping, Optional, Union

import strawberry
from strawberry.types import Info

from graphql_moviedb.core.arguments import to_graphql_sort
from graphql_moviedb.core.details import Fetcher, get_field
from graphql_moviedb.core.media import (
    CreditKind,
    MediaType,
    credit_kind,
    filmography_credit,
)
from graphql_moviedb.core.naming import constant_case
from graphql_moviedb.core.responses import graphql_key

strawberry.enum(MediaType, name="MediaType")


@strawberry.enum
class SortOrder(Enum):
    ASC = "asc"
    DESC = "desc"


@strawberry.enum(description="Champs de tri de discover (films et series)")
class SortBy(Enum):
    POPULARITY = "POPULARITY"
    RELEASE_DATE = "RELEASE_DATE"
    TITLE = "TITLE"
    ORIGINAL_TITLE = "ORIGINAL_TITLE"
    VOTE_AVERAGE = "VOTE_AVERAGE"
    VOTE_COUNT = "VOTE_COUNT"
    REVENUE = "REVENUE"


@strawberry.enum(description="Champs de tri des elements d'une liste")
class ListSortBy(Enum):
    ORIGINAL_ORDER = "ORIGINAL_ORDER"
    DATE_ADDED = "DATE_ADDED"
    PRIMARY_RELEASE_DATE = "PRIMARY_RELEASE_DATE"
    TITLE = "TITLE"
    VOTE_AVERAGE = "VOTE_AVERAGE"


@strawberry.enum
class MovieList(Enum):
    NOW_PLAYING = "NOW_PLAYING"
    POPULAR = "POPULAR"
    TOP_RATED = "TOP_RATED"
    UPCOMING = "UPCOMING"


@strawberry.enum
class ShowList(Enum):
    AIRING_TODAY = "AIRING_TODAY"
    ON_THE_AIR = "ON_THE_AIR"
    POPULAR = "POPULAR"
    TOP_RATED = "TOP_RATED"


class PayloadType:
    """
    Construction d'un type objet depuis une reponse REST normalisee.

    Chaque champ simple (non resolveur) recoit la valeur de la cle GraphQL
    correspondante du payload. Les sous-classes declarent leur payload comme
    premier attribut (strawberry.Private).
    """

    MEDIA_TYPE = None

    @classmethod
    def from_payload(cls, payload: Optional[Mapping[str, Any]]):
        if payload is None:
            return None
        payload = payload if isinstance(payload, dict) else dict(payload)
        values = {
            field.name: payload.get(graphql_key(field.name))
            for field in dataclasses.fields(cls)
            if field.init and field.name != "payload"
        }
        return cls(payload=payload, **values)

    @classmethod
    def from_list(cls, payloads: Optional[Iterable[Mapping[str, Any]]]) -> list:
        return [cls.from_payload(payload) for payload in payloads or ()]

    def fetcher(self, info: Info) -> Fetcher:
        return info.context.details_fetcher(self.MEDIA_TYPE)

    async def detail(self, info: Info, field: str) -> Any:
        """Champ de detail, recupere a la demande s'il manque au payload."""
        return await get_field(self.payload, field, self.fetcher(info))


def _results(payload: Optional[Mapping[str, Any]]) -> list:
    """Elements d'une sous-ressource paginee (videos, reviews)."""
    return list((payload or {}).get("results") or [])


# ----------------------------------------------------------------------
# Types feuilles
# ----------------------------------------------------------------------


@strawberry.type
class Genre(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    id: strawberry.ID
    name: Optional[str] = None


@strawberry.type
class Image(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    file_path: Optional[str] = None
    aspect_ratio: Optional[float] = None
    width: Optional[int] = None
    height: Optional[int] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    iso_639_1: Optional[str] = strawberry.field(name="iso_639_1", default=None)


@strawberry.type
class Images(PayloadType):
    payload: strawberry.Private[dict[str, Any]]

    @strawberry.field
    def backdrops(self) -> list[Image]:
        return Image.from_list(self.payload.get("backdrops"))

    @strawberry.field
    def posters(self) -> list[Image]:
        return Image.from_list(self.payload.get("posters"))

    @strawberry.field
    def logos(self) -> list[Image]:
        return Image.from_list(self.payload.get("logos"))

    @strawberry.field
    def profiles(self) -> list[Image]:
        return Image.from_list(self.payload.get("profiles"))

    @strawberry.field
    def stills(self) -> list[Image]:
        return Image.from_list(self.payload.get("stills"))


@strawberry.type
class Video(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    id: strawberry.ID
    key: Optional[str] = None
    name: Optional[str] = None
    site: Optional[str] = None
    size: Optional[int] = None
    official: Optional[bool] = None
    published_at: Optional[str] = None
    iso_639_1: Optional[str] = strawberry.field(name="iso_639_1", default=None)
    iso_3166_1: Optional[str] = strawberry.field(name="iso_3166_1", default=None)

    @strawberry.field
    def type(self) -> Optional[str]:
        """Type de video en CONSTANT_CASE (ex: BEHIND_THE_SCENES)."""
        return constant_case(self.payload.get("type") or "") or None


@strawberry.type
class Review(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    id: strawberry.ID
    author: Optional[str] = None
    content: Optional[str] = None
    url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @strawberry.field
    def rating(self) -> Optional[float]:
        return (self.payload.get("authorDetails") or {}).get("rating")


@strawberry.type
class Cast(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    id: strawberry.ID
    name: Optional[str] = None
    original_name: Optional[str] = None
    character: Optional[str] = None
    credit_id: Optional[str] = None
    order: Optional[int] = None
    gender: Optional[int] = None
    known_for_department: Optional[str] = None
    profile_path: Optional[str] = None
    popularity: Optional[float] = None


@strawberry.type
class Crew(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    id: strawberry.ID
    name: Optional[str] = None
    original_name: Optional[str] = None
    job: Optional[str] = None
    department: Optional[str] = None
    credit_id: Optional[str] = None
    gender: Optional[int] = None
    known_for_department: Optional[str] = None
    profile_path: Optional[str] = None
    popularity: Optional[float] = None


@strawberry.type
class Credits(PayloadType):
    payload: strawberry.Private[dict[str, Any]]

    @strawberry.field
    def cast(self) -> list[Cast]:
        return Cast.from_list(self.payload.get("cast"))

    @strawberry.field
    def crew(self) -> list[Crew]:
        return Crew.from_list(self.payload.get("crew"))

    @strawberry.field
    def guest_stars(self) -> list[Cast]:
        return Cast.from_list(self.payload.get("guestStars"))


@strawberry.type
class Company(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    id: strawberry.ID
    name: Optional[str] = None
    description: Optional[str] = None
    headquarters: Optional[str] = None
    homepage: Optional[str] = None
    logo_path: Optional[str] = None
    origin_country: Optional[str] = None

    MEDIA_TYPE = MediaType.COMPANY

    @strawberry.field
    def media_type(self) -> MediaType:
        return MediaType.COMPANY


@strawberry.type
class ResultsMeta(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    page: Optional[int] = None
    total_pages: Optional[int] = None
    total_results: Optional[int] = None


@strawberry.type
class ImagesConfiguration(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    base_url: Optional[str] = None
    secure_base_url: Optional[str] = None
    backdrop_sizes: Optional[list[str]] = None
    logo_sizes: Optional[list[str]] = None
    poster_sizes: Optional[list[str]] = None
    profile_sizes: Optional[list[str]] = None
    still_sizes: Optional[list[str]] = None


@strawberry.type
class Configuration(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    change_keys: Optional[list[str]] = None

    @strawberry.field
    def images(self) -> Optional[ImagesConfiguration]:
        return ImagesConfiguration.from_payload(self.payload.get("images"))


# ----------------------------------------------------------------------
# Medias
# ----------------------------------------------------------------------


@strawberry.type
class Movie(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    id: strawberry.ID
    title: Optional[str] = None
    original_title: Optional[str] = None
    original_language: Optional[str] = None
    overview: Optional[str] = None
    tagline: Optional[str] = None
    status: Optional[str] = None
    release_date: Optional[str] = None
    runtime: Optional[int] = None
    budget: Optional[float] = None
    revenue: Optional[float] = None
    homepage: Optional[str] = None
    imdb_id: Optional[str] = None
    adult: Optional[bool] = None
    popularity: Optional[float] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    genre_ids: Optional[list[int]] = None

    MEDIA_TYPE = MediaType.MOVIE

    @strawberry.field
    def media_type(self) -> MediaType:
        return MediaType.MOVIE

    @strawberry.field
    async def genres(self, info: Info) -> list[Genre]:
        fetcher = info.context.genres_fetcher(self.MEDIA_TYPE)
        return Genre.from_list(await get_field(self.payload, "genres", fetcher))

    @strawberry.field
    async def credits(self, info: Info) -> Optional[Credits]:
        return Credits.from_payload(await self.detail(info, "credits"))

    @strawberry.field
    async def images(self, info: Info) -> Optional[Images]:
        return Images.from_payload(await self.detail(info, "images"))

    @strawberry.field
    async def videos(self, info: Info) -> list[Video]:
        return Video.from_list(_results(await self.detail(info, "videos")))

    @strawberry.field
    async def reviews(self, info: Info) -> list[Review]:
        return Review.from_list(_results(await self.detail(info, "reviews")))

    @strawberry.field
    async def production_companies(self, info: Info) -> list[Company]:
        return Company.from_list(await self.detail(info, "productionCompanies"))


@strawberry.type
class Show(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    id: strawberry.ID
    name: Optional[str] = None
    original_name: Optional[str] = None
    original_language: Optional[str] = None
    overview: Optional[str] = None
    tagline: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    first_air_date: Optional[str] = None
    last_air_date: Optional[str] = None
    in_production: Optional[bool] = None
    number_of_seasons: Optional[int] = None
    number_of_episodes: Optional[int] = None
    episode_run_time: Optional[list[int]] = None
    origin_country: Optional[list[str]] = None
    homepage: Optional[str] = None
    popularity: Optional[float] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    genre_ids: Optional[list[int]] = None

    MEDIA_TYPE = MediaType.TV

    @strawberry.field
    def media_type(self) -> MediaType:
        return MediaType.TV

    @strawberry.field
    def title(self) -> Optional[str]:
        """Meme valeur que name, pour un acces uniforme avec Movie."""
        return self.payload.get("name")

    @strawberry.field
    def original_title(self) -> Optional[str]:
        return self.payload.get("originalName")

    @strawberry.field
    async def genres(self, info: Info) -> list[Genre]:
        fetcher = info.context.genres_fetcher(self.MEDIA_TYPE)
        return Genre.from_list(await get_field(self.payload, "genres", fetcher))

    @strawberry.field
    async def credits(self, info: Info) -> Optional[Credits]:
        return Credits.from_payload(await self.detail(info, "credits"))

    @strawberry.field
    async def images(self, info: Info) -> Optional[Images]:
        return Images.from_payload(await self.detail(info, "images"))

    @strawberry.field
    async def videos(self, info: Info) -> list[Video]:
        return Video.from_list(_results(await self.detail(info, "videos")))

    @strawberry.field
    async def reviews(self, info: Info) -> list[Review]:
        return Review.from_list(_results(await self.detail(info, "reviews")))

    @strawberry.field
    async def seasons(self, info: Info) -> "list[Season]":
        seasons = await self.detail(info, "seasons")
        return [
            Season.from_payload({**season, "showId": self.payload["id"]})
            for season in seasons or ()
        ]

    @strawberry.field
    async def season(self, info: Info, season_number: int) -> "Optional[Season]":
        """Une saison, completee par les donnees de la serie."""
        season = await info.context.v3.get_season(self.payload["id"], season_number)
        return Season.from_payload(
            {**season, "showId": self.payload["id"], "show": self.payload}
        )


@strawberry.type
class Season(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    id: strawberry.ID
    show_id: Optional[strawberry.ID] = None
    name: Optional[str] = None
    overview: Optional[str] = None
    air_date: Optional[str] = None
    season_number: Optional[int] = None
    episode_count: Optional[int] = None
    vote_average: Optional[float] = None
    poster_path: Optional[str] = None

    def fetcher(self, info: Info) -> Fetcher:
        return info.context.season_fetcher()

    @strawberry.field
    async def show(self, info: Info) -> Optional[Show]:
        show = self.payload.get("show")
        if not show:
            show = await info.context.v3.get_show(self.payload["showId"])
            self.payload["show"] = show
        return Show.from_payload(show)

    @strawberry.field
    async def episodes(self, info: Info) -> "list[Episode]":
        episodes = await self.detail(info, "episodes")
        return [
            Episode.from_payload({**episode, "showId": self.payload["showId"]})
            for episode in episodes or ()
        ]

    @strawberry.field
    async def credits(self, info: Info) -> Optional[Credits]:
        return Credits.from_payload(await self.detail(info, "credits"))

    @strawberry.field
    async def images(self, info: Info) -> Optional[Images]:
        return Images.from_payload(await self.detail(info, "images"))

    @strawberry.field
    async def videos(self, info: Info) -> list[Video]:
        return Video.from_list(_results(await self.detail(info, "videos")))


@strawberry.type
class Episode(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    id: strawberry.ID
    show_id: Optional[strawberry.ID] = None
    name: Optional[str] = None
    overview: Optional[str] = None
    air_date: Optional[str] = None
    season_number: Optional[int] = None
    episode_number: Optional[int] = None
    production_code: Optional[str] = None
    runtime: Optional[int] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    still_path: Optional[str] = None

    def fetcher(self, info: Info) -> Fetcher:
        return info.context.episode_fetcher()

    @strawberry.field
    async def credits(self, info: Info) -> Optional[Credits]:
        return Credits.from_payload(await self.detail(info, "credits"))

    @strawberry.field
    async def guest_stars(self, info: Info) -> list[Cast]:
        return Cast.from_list(await self.detail(info, "guestStars"))

    @strawberry.field
    async def images(self, info: Info) -> Optional[Images]:
        return Images.from_payload(await self.detail(info, "images"))

    @strawberry.field
    async def videos(self, info: Info) -> list[Video]:
        return Video.from_list(_results(await self.detail(info, "videos")))


Media = Annotated[Union[Movie, Show], strawberry.union("Media")]


@strawberry.type
class CastCredit(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    character: Optional[str] = None

    @strawberry.field
    def media(self) -> Optional[Media]:
        return media_object(self.payload.get("media"))


@strawberry.type
class CrewCredit(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    job: Optional[str] = None
    department: Optional[str] = None

    @strawberry.field
    def media(self) -> Optional[Media]:
        return media_object(self.payload.get("media"))


Credit = Annotated[Union[CastCredit, CrewCredit], strawberry.union("Credit")]

CREDIT_CLASSES = {
    CreditKind.CAST: CastCredit,
    CreditKind.CREW: CrewCredit,
}


@strawberry.type
class Person(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    id: strawberry.ID
    name: Optional[str] = None
    biography: Optional[str] = None
    birthday: Optional[str] = None
    deathday: Optional[str] = None
    place_of_birth: Optional[str] = None
    gender: Optional[int] = None
    known_for_department: Optional[str] = None
    also_known_as: Optional[list[str]] = None
    homepage: Optional[str] = None
    imdb_id: Optional[str] = None
    adult: Optional[bool] = None
    popularity: Optional[float] = None
    profile_path: Optional[str] = None

    MEDIA_TYPE = MediaType.PERSON

    @strawberry.field
    def media_type(self) -> MediaType:
        return MediaType.PERSON

    @strawberry.field
    def known_for(self) -> list[Media]:
        return [media_object(item) for item in self.payload.get("knownFor") or ()]

    @strawberry.field
    async def credits(self, info: Info) -> list[Credit]:
        """Filmographie : roles (CastCredit) et postes techniques (CrewCredit)."""
        combined = await self.detail(info, "combinedCredits") or {}
        credits = []
        for item in [*combined.get("cast", ()), *combined.get("crew", ())]:
            credit = filmography_credit(item)
            credits.append(CREDIT_CLASSES[credit_kind(credit)].from_payload(credit))
        return credits

    @strawberry.field
    async def images(self, info: Info) -> Optional[Images]:
        return Images.from_payload(await self.detail(info, "images"))


SearchResult = Annotated[
    Union[Movie, Show, Person, Company], strawberry.union("SearchResult")
]

MEDIA_CLASSES = {
    MediaType.MOVIE: Movie,
    MediaType.TV: Show,
    MediaType.PERSON: Person,
    MediaType.COMPANY: Company,
}


def media_object(payload: Optional[Mapping[str, Any]], default: Any = None):
    """
    Construit l'objet GraphQL d'un media selon son mediaType.

    Args:
        payload: Reponse REST normalisee
        default: Type a utiliser si le payload ne porte pas de mediaType

    Raises:
        UnsupportedMediaTypeError: Si le type n'est pas reconnu
    """
    if payload is None:
        return None
    kind = MediaType.parse(payload.get("mediaType") or default)
    return MEDIA_CLASSES[kind].from_payload(payload)


# ----------------------------------------------------------------------
# Enveloppes de resultats
# ----------------------------------------------------------------------


def _meta(response: Mapping[str, Any]) -> ResultsMeta:
    return ResultsMeta.from_payload(response.get("meta") or {})


@strawberry.type
class MovieResults:
    results: list[Movie]
    meta: ResultsMeta

    @classmethod
    def from_envelope(cls, response: Mapping[str, Any]) -> "MovieResults":
        return cls(results=Movie.from_list(response.get("results")), meta=_meta(response))


@strawberry.type
class ShowResults:
    results: list[Show]
    meta: ResultsMeta

    @classmethod
    def from_envelope(cls, response: Mapping[str, Any]) -> "ShowResults":
        return cls(results=Show.from_list(response.get("results")), meta=_meta(response))


@strawberry.type
class PersonResults:
    results: list[Person]
    meta: ResultsMeta

    @classmethod
    def from_envelope(cls, response: Mapping[str, Any]) -> "PersonResults":
        return cls(results=Person.from_list(response.get("results")), meta=_meta(response))


@strawberry.type
class SearchResults:
    results: list[SearchResult]
    meta: ResultsMeta

    @classmethod
    def from_envelope(cls, response: Mapping[str, Any]) -> "SearchResults":
        results = [media_object(item) for item in response.get("results") or ()]
        return cls(results=results, meta=_meta(response))


@strawberry.type
class ListItems:
    results: list[Media]
    meta: ResultsMeta

    @classmethod
    def from_envelope(cls, response: Mapping[str, Any]) -> "ListItems":
        results = [media_object(item) for item in response.get("results") or ()]
        return cls(results=results, meta=_meta(response))


# ----------------------------------------------------------------------
# Listes et compte utilisateur
# ----------------------------------------------------------------------


@strawberry.type(name="List")
class UserList(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    id: strawberry.ID
    name: Optional[str] = None
    description: Optional[str] = None
    public: Optional[bool] = None
    number_of_items: Optional[int] = None
    average_rating: Optional[float] = None
    runtime: Optional[int] = None
    revenue: Optional[float] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    iso_639_1: Optional[str] = strawberry.field(name="iso_639_1", default=None)
    iso_3166_1: Optional[str] = strawberry.field(name="iso_3166_1", default=None)

    def fetcher(self, info: Info) -> Fetcher:
        return info.context.list_fetcher()

    def _sort(self) -> tuple[Optional[str], Optional[str]]:
        sort_by = self.payload.get("sortBy")
        if isinstance(sort_by, str) and "." in sort_by:
            return to_graphql_sort(sort_by)
        return sort_by, self.payload.get("sortOrder")

    @strawberry.field
    def sort_by(self) -> Optional[ListSortBy]:
        field, _ = self._sort()
        return ListSortBy.__members__.get(field) if isinstance(field, str) else None

    @strawberry.field
    def sort_order(self) -> Optional[SortOrder]:
        _, order = self._sort()
        return SortOrder.__members__.get(order) if isinstance(order, str) else None

    @strawberry.field
    async def items(self, info: Info) -> Optional[ListItems]:
        items = await self.detail(info, "items")
        return ListItems.from_envelope(items) if items else None


@strawberry.type
class ListResults:
    results: list[UserList]
    meta: ResultsMeta

    @classmethod
    def from_envelope(cls, response: Mapping[str, Any]) -> "ListResults":
        return cls(results=UserList.from_list(response.get("results")), meta=_meta(response))


@strawberry.type
class Account(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    id: strawberry.ID
    username: Optional[str] = None
    name: Optional[str] = None
    include_adult: Optional[bool] = None
    iso_639_1: Optional[str] = strawberry.field(name="iso_639_1", default=None)
    iso_3166_1: Optional[str] = strawberry.field(name="iso_3166_1", default=None)


@strawberry.type
class ListItemResult(PayloadType):
    payload: strawberry.Private[dict[str, Any]]
    media_id: Optional[strawberry.ID] = None
    success: Optional[bool] = None

    @strawberry.field
    def media_type(self) -> Optional[MediaType]:
        value = self.payload.get("mediaType")
        return MediaType.parse(value) if value else None


@strawberry.type
class MutationResponse(PayloadType):
    """Resultat d'une mutation ; success vaut false si TMDB a refuse l'operation."""

    payload: strawberry.Private[dict[str, Any]]
    success: bool = False
    message: Optional[str] = None
    status_code: Optional[int] = None
    id: Optional[strawberry.ID] = None

    @strawberry.field
    def results(self) -> Optional[list[ListItemResult]]:
        results = self.payload.get("results")
        return ListItemResult.from_list(results) if results is not None else None


# ----------------------------------------------------------------------
# Entrees
# ----------------------------------------------------------------------


@strawberry.input
class DiscoverMoviesFilter:
    with_genres: Optional[list[int]] = None
    without_genres: Optional[list[int]] = None
    with_cast: Optional[list[int]] = None
    with_crew: Optional[list[int]] = None
    with_people: Optional[list[int]] = None
    with_companies: Optional[list[int]] = None
    with_original_language: Optional[str] = None
    primary_release_year: Optional[int] = None
    year: Optional[int] = None
    region: Optional[str] = None
    include_adult: Optional[bool] = None
    include_video: Optional[bool] = None
    release_date_gte: Optional[str] = strawberry.field(name="releaseDate_GTE", default=None)
    release_date_lte: Optional[str] = strawberry.field(name="releaseDate_LTE", default=None)
    vote_average_gte: Optional[float] = strawberry.field(name="voteAverage_GTE", default=None)
    vote_average_lte: Optional[float] = strawberry.field(name="voteAverage_LTE", default=None)
    vote_count_gte: Optional[int] = strawberry.field(name="voteCount_GTE", default=None)
    with_runtime_gte: Optional[int] = strawberry.field(name="withRuntime_GTE", default=None)
    with_runtime_lte: Optional[int] = strawberry.field(name="withRuntime_LTE", default=None)


@strawberry.input
class DiscoverShowsFilter:
    with_genres: Optional[list[int]] = None
    without_genres: Optional[list[int]] = None
    with_networks: Optional[list[int]] = None
    with_companies: Optional[list[int]] = None
    with_original_language: Optional[str] = None
    first_air_date_year: Optional[int] = None
    timezone: Optional[str] = None
    include_null_first_air_dates: Optional[bool] = None
    first_air_date_gte: Optional[str] = strawberry.field(name="firstAirDate_GTE", default=None)
    first_air_date_lte: Optional[str] = strawberry.field(name="firstAirDate_LTE", default=None)
    vote_average_gte: Optional[float] = strawberry.field(name="voteAverage_GTE", default=None)
    vote_average_lte: Optional[float] = strawberry.field(name="voteAverage_LTE", default=None)
    vote_count_gte: Optional[int] = strawberry.field(name="voteCount_GTE", default=None)
    with_runtime_gte: Optional[int] = strawberry.field(name="withRuntime_GTE", default=None)
    with_runtime_lte: Optional[int] = strawberry.field(name="withRuntime_LTE", default=None)


@strawberry.input
class ListItemInput:
    id: strawberry.ID
    media_type: MediaType


def input_args(value: Any) -> dict[str, Any]:
    """Valeurs d'un objet d'entree, indexees par nom d'attribut Python."""
    if value is None:
        return {}
    return {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}


def list_items(items: Iterable[ListItemInput]) -> list[dict[str, Any]]:
    return [{"id": item.id, "mediaType": item.media_type} for item in items]
