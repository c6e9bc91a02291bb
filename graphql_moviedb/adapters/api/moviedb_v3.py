"""
Client TMDB API v3.

Authentification par cle d'API (parametre de requete api_key). Les
operations propres a un utilisateur (compte, notes, favoris, watchlist)
utilisent en plus un session_id obtenu en echangeant le token d'acces v4 de
l'utilisateur, une seule fois par token.

Reference API: https://developer.themoviedb.org/reference/intro/getting-started

Usage:
    client = MovieDatabaseV3(api_key="xxx", cache=APICache())
    movie = await client.get_movie(603)
    found = await client.search("movie", {"query": "Matrix"})
    await client.close()
"""

from typing import Any, Iterable, Mapping, Optional

import httpx
from loguru import logger

from graphql_moviedb.adapters.api.cache import APICache
from graphql_moviedb.adapters.api.moviedb_client import MovieDatabaseClient
from graphql_moviedb.core.arguments import normalize_args
from graphql_moviedb.core.exceptions import AuthenticationError, UnsupportedMediaTypeError
from graphql_moviedb.core.media import MediaType
from graphql_moviedb.core.naming import to_rest_key
from graphql_moviedb.core.ports import ISessionStore
from graphql_moviedb.core.responses import split_envelope

# Sous-ressources ajoutees aux reponses de detail (append_to_response)
MOVIE_APPEND = "credits,images,videos,reviews"
SHOW_APPEND = "credits,images,videos,reviews,seasons"
SEASON_APPEND = "credits,images,videos,reviews"
EPISODE_APPEND = "credits,guest_stars,images,videos,reviews"
PERSON_APPEND = "combined_credits,images"


class MovieDatabaseV3(MovieDatabaseClient):
    """
    Client TMDB v3 : details, listes, recherche, discover, genres, compte.

    Example:
        client = MovieDatabaseV3(api_key="xxx", cache=cache, session_store=store,
                                 user_access_token=token)
        account = await client.get_account()
    """

    BASE_URL = "https://api.themoviedb.org/3"
    API_VERSION = 3

    def __init__(
        self,
        api_key: Optional[str],
        cache: Optional[APICache] = None,
        session_store: Optional[ISessionStore] = None,
        user_access_token: Optional[str] = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Args:
            api_key: Cle API TMDB v3
            cache: Cache TTL des reponses GET
            session_store: Stockage des sessions par token utilisateur
            user_access_token: Token d'acces v4 de l'utilisateur (optionnel)
            timeout: Timeout HTTP en secondes
        """
        super().__init__(cache=cache, user_access_token=user_access_token, timeout=timeout)
        self._api_key = api_key
        self._session_store = session_store
        self._session_id: Optional[str] = None
        self._detail_fetchers = {
            MediaType.MOVIE: self.get_movie,
            MediaType.TV: self.get_show,
            MediaType.PERSON: self.get_person,
            MediaType.COMPANY: self.get_company,
        }

    def _auth_params(self) -> dict[str, str]:
        return {"api_key": self._api_key} if self._api_key else {}

    # ------------------------------------------------------------------
    # Details
    # ------------------------------------------------------------------

    async def get_movie(self, movie_id: Any) -> dict[str, Any]:
        """Details d'un film, avec credits, images, videos et critiques."""
        return await self.get(f"/movie/{movie_id}", {"append_to_response": MOVIE_APPEND})

    async def get_show(self, show_id: Any) -> dict[str, Any]:
        """Details d'une serie TV, avec credits, images, videos et critiques."""
        return await self.get(f"/tv/{show_id}", {"append_to_response": SHOW_APPEND})

    async def get_season(self, show_id: Any, season_number: int) -> dict[str, Any]:
        """Details d'une saison (episodes inclus)."""
        return await self.get(
            f"/tv/{show_id}/season/{season_number}",
            {"append_to_response": SEASON_APPEND},
        )

    async def get_episode(
        self, show_id: Any, season_number: int, episode_number: int
    ) -> dict[str, Any]:
        """Details d'un episode (equipe et invites inclus)."""
        return await self.get(
            f"/tv/{show_id}/season/{season_number}/episode/{episode_number}",
            {"append_to_response": EPISODE_APPEND},
        )

    async def get_person(self, person_id: Any) -> dict[str, Any]:
        """Details d'une personne, avec sa filmographie et ses images."""
        return await self.get(f"/person/{person_id}", {"append_to_response": PERSON_APPEND})

    async def get_company(self, company_id: Any) -> dict[str, Any]:
        """Details d'une societe de production."""
        return await self.get(f"/company/{company_id}")

    async def get_details(self, media_type: Any, media_id: Any) -> dict[str, Any]:
        """Details d'un media quelconque, selon son type."""
        fetcher = self._detail_fetchers[MediaType.parse(media_type)]
        return await fetcher(media_id)

    # ------------------------------------------------------------------
    # Genres et configuration
    # ------------------------------------------------------------------

    async def get_genre_list(self, media_type: Any) -> list[dict[str, Any]]:
        """
        Liste officielle des genres pour un type de media.

        Raises:
            UnsupportedMediaTypeError: Si le type n'est ni MOVIE ni TV
        """
        kind = MediaType.parse(media_type)
        if kind not in (MediaType.MOVIE, MediaType.TV):
            raise UnsupportedMediaTypeError(media_type)
        data = await self.get(f"/genre/{kind.rest_path}/list")
        return data.get("genres", [])

    async def get_genres_by_id(
        self, media_type: Any, ids: Optional[Iterable[int]]
    ) -> list[dict[str, Any]]:
        """Convertit une liste d'IDs de genre en genres ; les IDs inconnus sont ignores."""
        genres = {genre["id"]: genre for genre in await self.get_genre_list(media_type)}
        return [genres[genre_id] for genre_id in ids or () if genre_id in genres]

    async def get_configuration(self) -> dict[str, Any]:
        """Configuration systeme (URLs des images, tailles disponibles...)."""
        return await self.get("/configuration")

    # ------------------------------------------------------------------
    # Listes, recherche et discover
    # ------------------------------------------------------------------

    async def discover(
        self, media_type: Any, params: Optional[Mapping[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Recherche de films ou series via l'API discover (filtres et tri).

        Les arguments GraphQL sont normalises (cles REST, operateurs pointes,
        tri adapte au type de media).
        """
        kind = MediaType.parse(media_type)
        response = await self.get(f"/discover/{kind.rest_path}", normalize_args(params, kind))
        return split_envelope(response)

    async def search(
        self, endpoint: str = "multi", params: Optional[Mapping[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Recherche par texte.

        Args:
            endpoint: "movie", "tv", "person", "company" ou "multi"
            params: query, page, include_adult...
        """
        response = await self.get(f"/search/{endpoint}", normalize_args(params))
        return split_envelope(response)

    async def movies(self, list_name: str, page: Optional[int] = None) -> dict[str, Any]:
        """
        Listes de films predefinies (/movie/popular, /movie/now_playing,
        /movie/top_rated, /movie/upcoming, /movie/latest).
        """
        response = await self.get(f"/movie/{to_rest_key(list_name)}", {"page": page})
        return split_envelope(response)

    async def shows(self, list_name: str, page: Optional[int] = None) -> dict[str, Any]:
        """
        Listes de series predefinies (/tv/popular, /tv/airing_today,
        /tv/on_the_air, /tv/top_rated, /tv/latest).
        """
        response = await self.get(f"/tv/{to_rest_key(list_name)}", {"page": page})
        return split_envelope(response)

    async def people(self, list_name: str = "popular", page: Optional[int] = None) -> dict[str, Any]:
        """Listes de personnes predefinies (/person/popular)."""
        response = await self.get(f"/person/{to_rest_key(list_name)}", {"page": page})
        return split_envelope(response)

    # ------------------------------------------------------------------
    # Compte utilisateur
    # ------------------------------------------------------------------

    async def convert_v4_token_to_session_id(self) -> str:
        """
        Echange le token d'acces v4 de l'utilisateur contre un session_id v3.

        Le session_id est memorise par token : l'echange n'a lieu qu'une fois.

        Raises:
            AuthenticationError: Token absent ("No token.") ou rejete
                                 par TMDB ("Invalid token.")
            httpx.HTTPError: Panne reseau ou erreur serveur (5xx) de TMDB
        """
        token = self.user_access_token
        if not token:
            raise AuthenticationError("No token.")
        if self._session_id:
            return self._session_id

        if self._session_store is not None:
            self._session_id = await self._session_store.get_session_id(token)
            if self._session_id:
                return self._session_id

        try:
            data = await self.post(
                "/authentication/session/convert/4", {"access_token": token}
            )
        except httpx.HTTPStatusError as error:
            # Seul un refus du token (4xx) est une erreur d'authentification
            if not error.response.is_client_error:
                raise
            logger.warning(
                "Echange de token refuse par TMDB",
                status=error.response.status_code,
            )
            raise AuthenticationError("Invalid token.") from error

        session_id = data.get("sessionId")
        if not session_id:
            raise AuthenticationError("Invalid token.")

        if self._session_store is not None:
            await self._session_store.save_session_id(token, session_id)
        self._session_id = session_id
        return session_id

    async def get_account(self) -> dict[str, Any]:
        """Details du compte de l'utilisateur connecte."""
        session_id = await self.convert_v4_token_to_session_id()
        return await self.get("/account", {"session_id": session_id}, cache=False)

    async def rate(self, media_type: Any, media_id: Any, value: float) -> dict[str, Any]:
        """Note un film ou une serie (0.5 a 10)."""
        kind = MediaType.parse(media_type)

        async def request() -> Any:
            session_id = await self.convert_v4_token_to_session_id()
            return await self.post(
                f"/{kind.rest_path}/{media_id}/rating",
                {"value": value},
                params={"session_id": session_id},
            )

        return await self.attempt("rate", request())

    async def delete_rating(self, media_type: Any, media_id: Any) -> dict[str, Any]:
        """Supprime la note de l'utilisateur pour un film ou une serie."""
        kind = MediaType.parse(media_type)

        async def request() -> Any:
            session_id = await self.convert_v4_token_to_session_id()
            return await self.delete(
                f"/{kind.rest_path}/{media_id}/rating",
                params={"session_id": session_id},
            )

        return await self.attempt("delete_rating", request())

    async def mark_as_favorite(
        self, media_type: Any, media_id: Any, favorite: bool = True
    ) -> dict[str, Any]:
        """Ajoute ou retire un media des favoris de l'utilisateur."""
        return await self._account_action(
            "favorite", media_type, media_id, {"favorite": favorite}
        )

    async def add_to_watchlist(
        self, media_type: Any, media_id: Any, watchlist: bool = True
    ) -> dict[str, Any]:
        """Ajoute ou retire un media de la watchlist de l'utilisateur."""
        return await self._account_action(
            "watchlist", media_type, media_id, {"watchlist": watchlist}
        )

    async def _account_action(
        self, action: str, media_type: Any, media_id: Any, flag: Mapping[str, bool]
    ) -> dict[str, Any]:
        body = {
            "media_type": MediaType.parse(media_type).rest_path,
            "media_id": int(media_id),
            **flag,
        }

        # Un echec de /account fait echouer la mutation sans lever
        async def request() -> Any:
            session_id = await self.convert_v4_token_to_session_id()
            account = await self.get_account()
            return await self.post(
                f"/account/{account['id']}/{action}",
                body,
                params={"session_id": session_id},
            )

        return await self.attempt(action, request())
