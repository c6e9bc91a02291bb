"""
Client HTTP de base pour l'API REST de TMDB.

Factorise ce que les clients v3 et v4 ont en commun:
- client httpx cree a la demande (lazy init) et ferme par close()
- authentification fournie par les sous-classes (_auth_headers, _auth_params)
- reponses JSON normalisees en camelCase (normalize_response)
- cache TTL partage pour les GET (APICache) et memoisation des GET pour la
  duree d'une operation GraphQL : deux champs freres qui demandent la meme
  ressource ne declenchent qu'un seul appel
- retry uniquement sur rate limiting (429)

Une instance est creee pour chaque operation GraphQL et fermee a la fin.
"""

import asyncio
from enum import Enum
from typing import Any, Awaitable, Mapping, Optional
from urllib.parse import urlencode

import httpx
from loguru import logger

from graphql_moviedb.adapters.api.cache import APICache
from graphql_moviedb.adapters.api.retry import RateLimitError, request_with_retry
from graphql_moviedb.core.responses import normalize_response


def encode_params(params: Optional[Mapping[str, Any]]) -> dict[str, str]:
    """
    Encode des parametres de requete au format attendu par TMDB.

    Les valeurs None sont retirees, les booleens deviennent "true"/"false",
    les sequences sont jointes par des virgules (ex: with_genres=28,12).
    """
    encoded: dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, (list, tuple, set, frozenset)):
            value = ",".join(str(item) for item in value)
        encoded[key] = str(value)
    return encoded


def error_message(error: Exception) -> str:
    """
    Extrait un message lisible d'une erreur httpx (status_message TMDB si present).

    Le message ne reprend jamais l'URL de la requete, qui porte la cle d'API.
    """
    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get("status_message") or body.get("message")
            if message:
                return message
        return f"{response.status_code} {response.reason_phrase}".strip()
    if isinstance(error, httpx.HTTPError):
        return f"Upstream request failed ({type(error).__name__})"
    return str(error)


def upstream_status(error: Optional[BaseException]) -> Optional[int]:
    """Code HTTP de la reponse TMDB en echec, si l'erreur en porte une."""
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code
    return None


class MovieDatabaseClient:
    """
    Client de base pour une version de l'API TMDB.

    Attributes:
        BASE_URL: URL de base de la version de l'API
        API_VERSION: Numero de version (3 ou 4)
    """

    BASE_URL = "https://api.themoviedb.org"
    API_VERSION = 0

    def __init__(
        self,
        cache: Optional[APICache] = None,
        user_access_token: Optional[str] = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Args:
            cache: Cache TTL partage des reponses GET (desactive si None)
            user_access_token: Token d'acces v4 de l'utilisateur courant (optionnel)
            timeout: Timeout des requetes HTTP en secondes
        """
        self._cache = cache
        self._user_access_token = user_access_token
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None
        self._memo: dict[str, asyncio.Task] = {}

    @property
    def user_access_token(self) -> Optional[str]:
        """Token d'acces de l'utilisateur de l'operation courante."""
        return self._user_access_token

    def _auth_headers(self) -> dict[str, str]:
        return {}

    def _auth_params(self) -> dict[str, str]:
        return {}

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Returns:
            httpx.AsyncClient configure avec l'authentification de la version
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.BASE_URL,
                headers={"Accept": "application/json", **self._auth_headers()},
                params=self._auth_params(),
                timeout=self._timeout,
            )
        return self._client

    def _request_key(self, method: str, path: str, params: Mapping[str, str]) -> str:
        query = urlencode(sorted(params.items()))
        return f"tmdb:v{self.API_VERSION}:{method}:{path.lower()}?{query}"

    async def get(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        cache: bool = True,
    ) -> Any:
        """
        Execute un GET et retourne la reponse normalisee.

        Les GET identiques d'une meme operation partagent un seul appel.
        Si cache est vrai, le cache TTL partage est consulte AVANT l'appel
        HTTP et alimente apres.

        Args:
            path: Chemin relatif a BASE_URL (ex: "/movie/603")
            params: Parametres de requete (cles REST)
            cache: Utiliser le cache partage (a desactiver pour les
                   ressources propres a un utilisateur)
        """
        query = encode_params(params)
        key = self._request_key("GET", path, query)
        task = self._memo.get(key)
        if task is None:
            task = asyncio.ensure_future(self._fetch(key, path, query, cache))
            self._memo[key] = task
        return await task

    async def _fetch(self, key: str, path: str, query: dict[str, str], cache: bool) -> Any:
        use_cache = cache and self._cache is not None
        if use_cache:
            cached = await self._cache.get(key)
            if cached is not None:
                logger.debug("Cache TMDB", key=key)
                return cached

        logger.debug("GET TMDB", version=self.API_VERSION, path=path)
        response = await request_with_retry(
            self._get_client(), "GET", path.lower(), params=query
        )
        data = normalize_response(response.json())

        if use_cache:
            await self._cache.set_response(key, data)
        return data

    async def send(
        self,
        method: str,
        path: str,
        body: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Execute une requete sans cache (POST, PUT, DELETE ou GET a effet de bord).

        Returns:
            Corps de la reponse normalise ({} si vide)
        """
        logger.debug("{} TMDB", method, version=self.API_VERSION, path=path)
        kwargs: dict[str, Any] = {"params": encode_params(params)}
        if body is not None:
            kwargs["json"] = body
        response = await request_with_retry(
            self._get_client(), method, path.lower(), **kwargs
        )
        if not response.content:
            return {}
        return normalize_response(response.json())

    async def post(self, path: str, body: Optional[Mapping[str, Any]] = None, **kwargs) -> Any:
        return await self.send("POST", path, body, **kwargs)

    async def put(self, path: str, body: Optional[Mapping[str, Any]] = None, **kwargs) -> Any:
        return await self.send("PUT", path, body, **kwargs)

    async def delete(self, path: str, body: Optional[Mapping[str, Any]] = None, **kwargs) -> Any:
        return await self.send("DELETE", path, body, **kwargs)

    async def attempt(self, operation: str, request: Awaitable[Any]) -> dict[str, Any]:
        """
        Execute une requete de mutation sans propager les erreurs amont.

        Args:
            operation: Nom de l'operation (pour les logs)
            request: Coroutine de la requete

        Returns:
            Le corps de la reponse (success=True par defaut), ou
            {"success": False, "message": ...} si l'API a echoue
        """
        try:
            response = await request
        except (httpx.HTTPError, RateLimitError) as error:
            message = error_message(error)
            logger.warning("Echec de la mutation TMDB", operation=operation, error=message)
            return {"success": False, "message": message}

        result = dict(response) if isinstance(response, Mapping) else {}
        result.setdefault("success", True)
        result.setdefault("message", result.get("statusMessage"))
        return result

    async def close(self) -> None:
        """
        Ferme le client HTTP et oublie les requetes memoisees.

        Doit etre appele a la fin de l'operation pour liberer
        les ressources reseau.
        """
        self._memo.clear()
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
