"""
Stockage des sessions TMDB v3 associees aux tokens d'acces utilisateur v4.

L'echange d'un token v4 contre un session_id v3 n'est fait qu'une fois par
token : le resultat est conserve dans un cache TTL injecte. Les tokens ne
sont jamais stockes en clair, la cle est leur empreinte SHA-256.

Deux requetes concurrentes pour un meme token inconnu peuvent chacune faire
l'echange ; la seconde ecriture remplace simplement la premiere.
"""

import hashlib
from typing import Optional

from graphql_moviedb.core.ports import ICache, ISessionStore


class CachedSessionStore(ISessionStore):
    """
    Implementation de ISessionStore au-dessus d'un cache TTL.

    Example:
        store = CachedSessionStore(cache=APICache(".cache/sessions"), ttl=86400)
        await store.save_session_id(token, "abc123")
        await store.get_session_id(token)  # => "abc123"
    """

    KEY_PREFIX = "tmdb:session:"

    def __init__(self, cache: ICache, ttl: int) -> None:
        """
        Args:
            cache: Collaborateur de cache (get/set avec TTL)
            ttl: Duree de vie d'une session en secondes
        """
        self._cache = cache
        self._ttl = ttl

    def _key(self, access_token: str) -> str:
        digest = hashlib.sha256(access_token.encode("utf-8")).hexdigest()
        return f"{self.KEY_PREFIX}{digest}"

    async def get_session_id(self, access_token: str) -> Optional[str]:
        return await self._cache.get(self._key(access_token))

    async def save_session_id(self, access_token: str, session_id: str) -> None:
        await self._cache.set(self._key(access_token), session_id, self._ttl)
