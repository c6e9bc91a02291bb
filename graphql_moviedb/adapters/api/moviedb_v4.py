"""
Client TMDB API v4 : listes utilisateur.

Authentification par token Bearer : le token d'acces de l'utilisateur quand
la requete GraphQL en fournit un, sinon le token de lecture de
l'application. Les listes privees et toutes les mutations exigent le token
de l'utilisateur proprietaire.

Reference API: https://developer.themoviedb.org/v4/reference/intro/getting-started
"""

from typing import Any, Iterable, Mapping, Optional

import jwt
from loguru import logger

from graphql_moviedb.adapters.api.cache import APICache
from graphql_moviedb.adapters.api.moviedb_client import MovieDatabaseClient
from graphql_moviedb.core.arguments import normalize_args, to_graphql_sort
from graphql_moviedb.core.exceptions import AuthenticationError
from graphql_moviedb.core.media import MediaType
from graphql_moviedb.core.responses import split_envelope

# Cles de pagination deplacees de la liste vers son enveloppe "items"
PAGINATION_KEYS = ("page", "totalPages", "totalResults")


def account_id_from_token(access_token: Optional[str]) -> str:
    """
    Extrait l'identifiant de compte v4 d'un token d'acces utilisateur.

    Le token est un JWT emis par TMDB ; la signature n'est pas verifiee ici
    (TMDB la verifie a chaque appel), seul le claim "sub" est lu.

    Raises:
        AuthenticationError: Token absent ou illisible
    """
    if not access_token:
        raise AuthenticationError("No token.")
    try:
        claims = jwt.decode(access_token, options={"verify_signature": False})
    except jwt.PyJWTError as error:
        raise AuthenticationError("Invalid token.") from error

    account_id = claims.get("sub") or claims.get("accountId")
    if not account_id:
        raise AuthenticationError("Invalid token.")
    return str(account_id)


def list_item_input(item: Mapping[str, Any]) -> dict[str, Any]:
    """Convertit un element GraphQL {id, mediaType} en element REST."""
    return {
        "media_type": MediaType.parse(item["mediaType"]).rest_path,
        "media_id": int(item["id"]),
    }


class MovieDatabaseV4(MovieDatabaseClient):
    """
    Client TMDB v4 : lecture et gestion des listes.

    Les GET ne passent par le cache partage que sans token utilisateur :
    une reponse obtenue avec des droits d'utilisateur ne doit pas etre
    servie a un autre.

    Example:
        client = MovieDatabaseV4(read_access_token="app-token", user_access_token=token)
        result = await client.create_list(name="A voir")
    """

    BASE_URL = "https://api.themoviedb.org/4"
    API_VERSION = 4

    def __init__(
        self,
        read_access_token: Optional[str],
        cache: Optional[APICache] = None,
        user_access_token: Optional[str] = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Args:
            read_access_token: Token de lecture de l'application (v4)
            cache: Cache TTL des reponses GET
            user_access_token: Token d'acces de l'utilisateur (optionnel)
            timeout: Timeout HTTP en secondes
        """
        super().__init__(cache=cache, user_access_token=user_access_token, timeout=timeout)
        self._read_access_token = read_access_token

    def _auth_headers(self) -> dict[str, str]:
        token = self.user_access_token or self._read_access_token
        return {"Authorization": f"Bearer {token}"} if token else {}

    async def get(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        cache: bool = True,
    ) -> Any:
        return await super().get(path, params, cache=cache and not self.user_access_token)

    @property
    def account_id(self) -> str:
        """Identifiant de compte v4 de l'utilisateur courant."""
        return account_id_from_token(self.user_access_token)

    # ------------------------------------------------------------------
    # Lecture
    # ------------------------------------------------------------------

    async def get_list(
        self,
        list_id: Any,
        page: Optional[int] = None,
        sort_by: Any = None,
        sort_order: Any = None,
    ) -> dict[str, Any]:
        """
        Recupere une liste et une page de ses elements.

        La reponse est remise en forme pour le schema GraphQL:
        - les elements et la pagination passent sous "items" ({results, meta})
        - numberOfItems reprend totalResults (comme les listes de myLists)
        - le tri REST ("created_at.asc") est traduit en sortBy/sortOrder
        """
        params = normalize_args({"page": page, "sortBy": sort_by, "sortOrder": sort_order})
        response = dict(await self.get(f"/list/{list_id}", params))

        envelope = {"results": response.pop("results", [])}
        envelope.update({key: response.pop(key) for key in PAGINATION_KEYS if key in response})
        response["items"] = split_envelope(envelope)
        response["numberOfItems"] = envelope.get("totalResults")
        response["sortBy"], response["sortOrder"] = to_graphql_sort(response.get("sortBy"))
        return response

    async def get_my_lists(self, page: Optional[int] = None) -> dict[str, Any]:
        """
        Listes creees par l'utilisateur courant.

        Raises:
            AuthenticationError: Sans token utilisateur valide
        """
        response = await self.get(f"/account/{self.account_id}/lists", {"page": page})
        return split_envelope(response)

    async def check_list_item_status(
        self, list_id: Any, media_type: Any, media_id: Any
    ) -> dict[str, Any]:
        """Verifie si un media fait deja partie d'une liste."""
        params = {
            "media_type": MediaType.parse(media_type).rest_path,
            "media_id": int(media_id),
        }
        return await self.attempt(
            "check_list_item_status",
            self.get(f"/list/{list_id}/item_status", params, cache=False),
        )

    # ------------------------------------------------------------------
    # Mutations (proprietaire de la liste uniquement)
    # ------------------------------------------------------------------

    async def create_list(
        self,
        name: str,
        description: Optional[str] = None,
        iso_639_1: str = "en",
        public: Optional[bool] = None,
    ) -> dict[str, Any]:
        """Cree une nouvelle liste ; la reponse contient son id."""
        body = {"name": name, "description": description or "", "iso_639_1": iso_639_1}
        if public is not None:
            body["public"] = public
        logger.info("Creation de liste TMDB", name=name)
        return await self.attempt("create_list", self.post("/list", body))

    async def update_list(self, list_id: Any, **params: Any) -> dict[str, Any]:
        """
        Met a jour les metadonnees d'une liste (name, description, public,
        sortBy/sortOrder).
        """
        body = normalize_args({key: value for key, value in params.items() if value is not None})
        return await self.attempt("update_list", self.put(f"/list/{list_id}", body))

    async def delete_list(self, list_id: Any) -> dict[str, Any]:
        """Supprime une liste."""
        logger.info("Suppression de liste TMDB", list_id=list_id)
        return await self.attempt("delete_list", self.delete(f"/list/{list_id}"))

    async def clear_list(self, list_id: Any) -> dict[str, Any]:
        """Vide une liste de tous ses elements en une seule requete."""
        return await self.attempt("clear_list", self.send("GET", f"/list/{list_id}/clear"))

    async def add_list_items(
        self, list_id: Any, items: Iterable[Mapping[str, Any]]
    ) -> dict[str, Any]:
        """
        Ajoute des films ou series a une liste.

        La reponse contient un resultat par element ; un resultat en echec
        indique le plus souvent que l'element etait deja dans la liste.
        """
        body = {"items": [list_item_input(item) for item in items]}
        return await self.attempt("add_list_items", self.post(f"/list/{list_id}/items", body))

    async def remove_list_items(
        self, list_id: Any, items: Iterable[Mapping[str, Any]]
    ) -> dict[str, Any]:
        """Retire des elements d'une liste."""
        body = {"items": [list_item_input(item) for item in items]}
        return await self.attempt(
            "remove_list_items", self.delete(f"/list/{list_id}/items", body)
        )
