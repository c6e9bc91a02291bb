"""
Contexte GraphQL d'une operation.

Chaque operation recoit ses propres clients TMDB (v3 et v4), crees a partir
du container DI avec le token d'acces de l'utilisateur lu dans l'en-tete
Authorization, et fermes une fois la reponse produite. La memoisation des
GET et le cache des champs de detail ne depassent donc jamais une operation.
"""

from typing import Any, AsyncIterator, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from graphql_moviedb.adapters.api.moviedb_v3 import MovieDatabaseV3
from graphql_moviedb.adapters.api.moviedb_v4 import MovieDatabaseV4
from graphql_moviedb.core.details import Fetcher
from graphql_moviedb.core.media import MediaType


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Extrait le token d'un en-tete Authorization.

    Le prefixe "Bearer " est optionnel ; un en-tete vide donne None.
    """
    raw = (authorization or "").strip()
    if not raw:
        return None
    scheme, _, token = raw.partition(" ")
    if scheme.lower() == "bearer":
        return token.strip() or None
    return raw


class GraphQLContext(BaseContext):
    """
    Contexte partage par tous les resolveurs d'une operation.

    Attributes:
        v3: Client TMDB v3 de l'operation
        v4: Client TMDB v4 de l'operation
    """

    def __init__(self, v3: MovieDatabaseV3, v4: MovieDatabaseV4) -> None:
        super().__init__()
        self.v3 = v3
        self.v4 = v4

    @property
    def user_access_token(self) -> Optional[str]:
        return self.v3.user_access_token

    def details_fetcher(self, media_type: Any) -> Fetcher:
        """Fetcher de la reponse de detail complete d'un media."""
        kind = MediaType.parse(media_type)

        async def fetch(entity):
            return await self.v3.get_details(kind, entity["id"])

        return fetch

    def genres_fetcher(self, media_type: Any) -> Fetcher:
        """Fetcher des genres d'un media a partir de ses genreIds."""
        kind = MediaType.parse(media_type)

        async def fetch(entity):
            return {"genres": await self.v3.get_genres_by_id(kind, entity.get("genreIds"))}

        return fetch

    def season_fetcher(self) -> Fetcher:
        """Fetcher du detail d'une saison (showId + seasonNumber)."""

        async def fetch(entity):
            return await self.v3.get_season(entity["showId"], entity["seasonNumber"])

        return fetch

    def episode_fetcher(self) -> Fetcher:
        """Fetcher du detail d'un episode (showId + seasonNumber + episodeNumber)."""

        async def fetch(entity):
            return await self.v3.get_episode(
                entity["showId"], entity["seasonNumber"], entity["episodeNumber"]
            )

        return fetch

    def list_fetcher(self) -> Fetcher:
        """Fetcher d'une liste v4 complete (elements inclus)."""

        async def fetch(entity):
            return await self.v4.get_list(entity["id"])

        return fetch

    async def close(self) -> None:
        await self.v3.close()
        await self.v4.close()


async def get_context(request: Request) -> AsyncIterator[GraphQLContext]:
    """
    Dependance FastAPI construisant le contexte de l'operation.

    Les clients sont fermes apres l'execution, meme en cas d'erreur.
    """
    container = request.app.state.container
    token = bearer_token(request.headers.get("authorization"))
    context = GraphQLContext(
        v3=container.moviedb_v3(user_access_token=token),
        v4=container.moviedb_v4(user_access_token=token),
    )
    try:
        yield context
    finally:
        await context.close()
