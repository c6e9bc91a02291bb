"""
Cache persistant avec TTL pour les appels a l'API TMDB.

Le cache utilise diskcache pour la persistence sur disque. Il sert a deux
usages distincts, chacun avec sa propre instance:
- les reponses GET de l'API REST (RESPONSE_TTL par defaut)
- les identifiants de session obtenus a partir des tokens v4 (SESSION_TTL)
"""

import asyncio
from functools import partial
from pathlib import Path
from typing import Any, Optional, Union

from diskcache import Cache

from graphql_moviedb.core.ports import ICache


class APICache(ICache):
    """
    Cache asynchrone avec TTL.

    Utilise diskcache pour la persistence et run_in_executor pour
    les operations asynchrones non-bloquantes.

    Attributes:
        RESPONSE_TTL: Duree de vie des reponses REST (10000 secondes)
        SESSION_TTL: Duree de vie des sessions utilisateur (24h)

    Example:
        cache = APICache(cache_dir=".cache/api")
        await cache.set_response("GET /3/movie/603", data)
        data = await cache.get("GET /3/movie/603")
    """

    RESPONSE_TTL = 10000
    SESSION_TTL = 24 * 60 * 60  # 24 heures en secondes (86400)

    def __init__(
        self,
        cache_dir: Union[str, Path] = ".cache/api",
        default_ttl: Optional[int] = None,
    ) -> None:
        """
        Initialise le cache avec un repertoire de stockage.

        Args:
            cache_dir: Chemin vers le repertoire du cache (cree si inexistant)
            default_ttl: TTL utilise par set_response (RESPONSE_TTL si None)
        """
        self._cache = Cache(cache_dir)
        self._default_ttl = default_ttl if default_ttl is not None else self.RESPONSE_TTL

    async def get(self, key: str) -> Optional[Any]:
        """
        Recupere une valeur du cache.

        Args:
            key: Cle unique identifiant la donnee

        Returns:
            La valeur stockee ou None si absente ou expiree
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._cache.get, key)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        """
        Stocke une valeur dans le cache avec un TTL.

        Args:
            key: Cle unique identifiant la donnee
            value: Valeur a stocker (doit etre serializable)
            ttl: Duree de vie en secondes
        """
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            None, partial(self._cache.set, key, value, expire=ttl)
        )

    async def set_response(self, key: str, value: Any) -> None:
        """Stocke une reponse REST avec le TTL par defaut du cache."""
        await self.set(key, value, self._default_ttl)

    async def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._cache.clear)

    def close(self) -> None:
        """Ferme la connexion au cache (a appeler a la fin)."""
        self._cache.close()
