"""
Schema GraphQL : requetes et mutations.

Les resolveurs racine traduisent les arguments GraphQL en appels aux clients
TMDB du contexte et construisent les types objets a partir des reponses.
Les erreurs des requetes de lecture sont propagees au formateur d'erreurs ;
les mutations renvoient un MutationResponse (success=false en cas d'echec
TMDB), seules les erreurs d'authentification sont propagees.
"""

import asyncio
from typing import Annotated, Optional

import strawberry
from loguru import logger
from strawberry.types import Info

from graphql_moviedb.adapters.graphql.errors import error_code
from graphql_moviedb.adapters.graphql.types import (
    Account,
    Company,
    Configuration,
    DiscoverMoviesFilter,
    DiscoverShowsFilter,
    Episode,
    Genre,
    ListItemInput,
    ListResults,
    ListSortBy,
    Movie,
    MovieList,
    MovieResults,
    MutationResponse,
    Person,
    PersonResults,
    SearchResults,
    Season,
    Show,
    ShowList,
    ShowResults,
    SortBy,
    SortOrder,
    UserList,
    input_args,
    list_items,
)
from graphql_moviedb.core.media import MediaType


@strawberry.type
class Query:
    @strawberry.field
    async def movie(self, info: Info, id: strawberry.ID) -> Optional[Movie]:
        return Movie.from_payload(await info.context.v3.get_movie(id))

    @strawberry.field
    async def show(self, info: Info, id: strawberry.ID) -> Optional[Show]:
        return Show.from_payload(await info.context.v3.get_show(id))

    @strawberry.field
    async def season(
        self, info: Info, show_id: strawberry.ID, season_number: int
    ) -> Optional[Season]:
        """Une saison, fusionnee avec la serie a laquelle elle appartient."""
        v3 = info.context.v3
        show, season = await asyncio.gather(
            v3.get_show(show_id), v3.get_season(show_id, season_number)
        )
        return Season.from_payload({**season, "showId": show_id, "show": show})

    @strawberry.field
    async def episode(
        self,
        info: Info,
        show_id: strawberry.ID,
        season_number: int,
        episode_number: int,
    ) -> Optional[Episode]:
        episode = await info.context.v3.get_episode(show_id, season_number, episode_number)
        return Episode.from_payload({**episode, "showId": show_id})

    @strawberry.field
    async def person(self, info: Info, id: strawberry.ID) -> Optional[Person]:
        return Person.from_payload(await info.context.v3.get_person(id))

    @strawberry.field
    async def company(self, info: Info, id: strawberry.ID) -> Optional[Company]:
        return Company.from_payload(await info.context.v3.get_company(id))

    @strawberry.field
    async def genres(
        self, info: Info, media_type: MediaType = MediaType.MOVIE
    ) -> list[Genre]:
        return Genre.from_list(await info.context.v3.get_genre_list(media_type))

    @strawberry.field
    async def configuration(self, info: Info) -> Configuration:
        return Configuration.from_payload(await info.context.v3.get_configuration())

    @strawberry.field
    async def search(
        self, info: Info, query: str, page: Optional[int] = None
    ) -> SearchResults:
        """Recherche multiple : films, series et personnes."""
        response = await info.context.v3.search("multi", {"query": query, "page": page})
        return SearchResults.from_envelope(response)

    @strawberry.field
    async def movies(
        self,
        info: Info,
        query: Optional[str] = None,
        list_name: Annotated[MovieList, strawberry.argument(name="list")] = MovieList.POPULAR,
        page: Optional[int] = None,
    ) -> MovieResults:
        """Recherche de films par texte, ou liste predefinie sans texte."""
        v3 = info.context.v3
        if query:
            response = await v3.search("movie", {"query": query, "page": page})
        else:
            response = await v3.movies(list_name.value, page)
        return MovieResults.from_envelope(response)

    @strawberry.field
    async def shows(
        self,
        info: Info,
        query: Optional[str] = None,
        list_name: Annotated[ShowList, strawberry.argument(name="list")] = ShowList.POPULAR,
        page: Optional[int] = None,
    ) -> ShowResults:
        v3 = info.context.v3
        if query:
            response = await v3.search("tv", {"query": query, "page": page})
        else:
            response = await v3.shows(list_name.value, page)
        return ShowResults.from_envelope(response)

    @strawberry.field
    async def people(
        self, info: Info, query: Optional[str] = None, page: Optional[int] = None
    ) -> PersonResults:
        v3 = info.context.v3
        if query:
            response = await v3.search("person", {"query": query, "page": page})
        else:
            response = await v3.people("popular", page)
        return PersonResults.from_envelope(response)

    @strawberry.field
    async def discover_movies(
        self,
        info: Info,
        filter: Optional[DiscoverMoviesFilter] = None,
        sort_by: Optional[SortBy] = None,
        sort_order: Optional[SortOrder] = None,
        page: Optional[int] = None,
    ) -> MovieResults:
        params = {**input_args(filter), "sortBy": sort_by, "sortOrder": sort_order, "page": page}
        return MovieResults.from_envelope(await info.context.v3.discover(MediaType.MOVIE, params))

    @strawberry.field
    async def discover_shows(
        self,
        info: Info,
        filter: Optional[DiscoverShowsFilter] = None,
        sort_by: Optional[SortBy] = None,
        sort_order: Optional[SortOrder] = None,
        page: Optional[int] = None,
    ) -> ShowResults:
        params = {**input_args(filter), "sortBy": sort_by, "sortOrder": sort_order, "page": page}
        return ShowResults.from_envelope(await info.context.v3.discover(MediaType.TV, params))

    @strawberry.field(name="list")
    async def user_list(
        self,
        info: Info,
        id: strawberry.ID,
        page: Optional[int] = None,
        sort_by: Optional[ListSortBy] = None,
        sort_order: Optional[SortOrder] = None,
    ) -> Optional[UserList]:
        response = await info.context.v4.get_list(id, page, sort_by, sort_order)
        return UserList.from_payload(response)

    @strawberry.field
    async def my_lists(self, info: Info, page: Optional[int] = None) -> ListResults:
        """Listes de l'utilisateur identifie par son token d'acces."""
        return ListResults.from_envelope(await info.context.v4.get_my_lists(page))

    @strawberry.field
    async def list_item_status(
        self,
        info: Info,
        list_id: strawberry.ID,
        media_type: MediaType,
        media_id: strawberry.ID,
    ) -> MutationResponse:
        response = await info.context.v4.check_list_item_status(list_id, media_type, media_id)
        return MutationResponse.from_payload(response)

    @strawberry.field
    async def account(self, info: Info) -> Optional[Account]:
        return Account.from_payload(await info.context.v3.get_account())


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_list(
        self,
        info: Info,
        name: str,
        description: Optional[str] = None,
        public: Optional[bool] = None,
        language: Annotated[str, strawberry.argument(name="iso_639_1")] = "en",
    ) -> MutationResponse:
        response = await info.context.v4.create_list(
            name=name, description=description, iso_639_1=language, public=public
        )
        return MutationResponse.from_payload(response)

    @strawberry.mutation
    async def update_list(
        self,
        info: Info,
        id: strawberry.ID,
        name: Optional[str] = None,
        description: Optional[str] = None,
        public: Optional[bool] = None,
        sort_by: Optional[ListSortBy] = None,
        sort_order: Optional[SortOrder] = None,
    ) -> MutationResponse:
        response = await info.context.v4.update_list(
            id,
            name=name,
            description=description,
            public=public,
            sortBy=sort_by,
            sortOrder=sort_order,
        )
        return MutationResponse.from_payload(response)

    @strawberry.mutation
    async def delete_list(self, info: Info, id: strawberry.ID) -> MutationResponse:
        return MutationResponse.from_payload(await info.context.v4.delete_list(id))

    @strawberry.mutation
    async def clear_list(self, info: Info, id: strawberry.ID) -> MutationResponse:
        return MutationResponse.from_payload(await info.context.v4.clear_list(id))

    @strawberry.mutation
    async def add_list_items(
        self, info: Info, id: strawberry.ID, items: list[ListItemInput]
    ) -> MutationResponse:
        response = await info.context.v4.add_list_items(id, list_items(items))
        return MutationResponse.from_payload(response)

    @strawberry.mutation
    async def remove_list_items(
        self, info: Info, id: strawberry.ID, items: list[ListItemInput]
    ) -> MutationResponse:
        response = await info.context.v4.remove_list_items(id, list_items(items))
        return MutationResponse.from_payload(response)

    @strawberry.mutation
    async def rate(
        self, info: Info, media_type: MediaType, id: strawberry.ID, value: float
    ) -> MutationResponse:
        return MutationResponse.from_payload(await info.context.v3.rate(media_type, id, value))

    @strawberry.mutation
    async def delete_rating(
        self, info: Info, media_type: MediaType, id: strawberry.ID
    ) -> MutationResponse:
        response = await info.context.v3.delete_rating(media_type, id)
        return MutationResponse.from_payload(response)

    @strawberry.mutation
    async def mark_as_favorite(
        self, info: Info, media_type: MediaType, id: strawberry.ID, favorite: bool = True
    ) -> MutationResponse:
        response = await info.context.v3.mark_as_favorite(media_type, id, favorite)
        return MutationResponse.from_payload(response)

    @strawberry.mutation
    async def add_to_watchlist(
        self, info: Info, media_type: MediaType, id: strawberry.ID, watchlist: bool = True
    ) -> MutationResponse:
        response = await info.context.v3.add_to_watchlist(media_type, id, watchlist)
        return MutationResponse.from_payload(response)


class MovieDatabaseSchema(strawberry.Schema):
    """Schema dont les erreurs d'execution sont journalisees via loguru."""

    def process_errors(self, errors, execution_context=None) -> None:
        for error in errors:
            logger.warning(
                "Erreur GraphQL",
                message=error.message,
                path=error.path,
                code=error_code(error.original_error),
            )


schema = MovieDatabaseSchema(query=Query, mutation=Mutation)
