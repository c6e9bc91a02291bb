"""
Interfaces ports du domaine.

Contrats abstraits implementes par les adaptateurs (cache disque, stockage
des sessions). Le domaine ne depend que de ces interfaces, ce qui permet de
les remplacer par des doubles dans les tests.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class ICache(ABC):
    """
    Cache cle/valeur asynchrone avec TTL.

    Utilise pour les reponses REST et pour les identifiants de session.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Retourne la valeur associee a la cle, ou None si absente ou expiree."""
        ...

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: int) -> None:
        """Stocke une valeur pour ttl secondes."""
        ...


class ISessionStore(ABC):
    """
    Stockage des identifiants de session TMDB v3 par token d'acces v4.
    """

    @abstractmethod
    async def get_session_id(self, access_token: str) -> Optional[str]:
        """Retourne la session connue pour ce token, ou None."""
        ...

    @abstractmethod
    async def save_session_id(self, access_token: str, session_id: str) -> None:
        """Memorise la session obtenue pour ce token."""
        ...
