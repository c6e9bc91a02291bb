"""
Relance des requetes TMDB limitees en debit (429 Too Many Requests).

Le 429 n'est pas un echec mais une demande de ralentir : la requete est
relancee apres le delai annonce par TMDB (header Retry-After), ou a defaut
apres un backoff exponentiel avec jitter. Toute autre erreur HTTP ou reseau
remonte des la premiere tentative.

Usage:
    response = await request_with_retry(client, "GET", "/movie/603")
"""

from typing import Callable, Optional

import httpx
from loguru import logger
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Exception levee quand TMDB repond 429.

    Attributes:
        retry_after: Secondes a attendre selon le header Retry-After,
                     ou None si TMDB ne l'a pas fourni
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def parse_retry_after(response: httpx.Response) -> Optional[int]:
    """Delai du header Retry-After en secondes (la forme date HTTP est ignoree)."""
    value = response.headers.get("Retry-After", "").strip()
    return int(value) if value.isdigit() else None


def wait_retry_after(max_wait: float = 60) -> Callable[[RetryCallState], float]:
    """
    Strategie d'attente tenacity pour les RateLimitError.

    Le delai Retry-After annonce par TMDB est respecte, plafonne a max_wait ;
    sans header, backoff exponentiel aleatoire.
    """
    backoff = wait_random_exponential(multiplier=1, min=1, max=max_wait)

    def wait(retry_state: RetryCallState) -> float:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        if isinstance(error, RateLimitError) and error.retry_after is not None:
            return min(error.retry_after, max_wait)
        return backoff(retry_state)

    return wait


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    max_wait: float = 60,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP, relancee tant que TMDB repond 429.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, PUT, DELETE)
        url: URL ou chemin relatif a appeler
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Attente maximale entre deux tentatives, en secondes
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        httpx.Response en cas de succes

    Raises:
        RateLimitError: Si TMDB repond encore 429 a la derniere tentative
        httpx.HTTPStatusError: Pour les autres erreurs HTTP
    """

    def log_rate_limit(retry_state: RetryCallState) -> None:
        logger.debug(
            "Rate limit TMDB, nouvelle tentative",
            url=url,
            attempt=retry_state.attempt_number,
            wait=retry_state.next_action.sleep if retry_state.next_action else None,
        )

    retrying = AsyncRetrying(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_retry_after(max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=log_rate_limit,
        reraise=True,
    )
    async for attempt in retrying:
        with attempt:
            response = await client.request(method, url, **kwargs)
            if response.status_code == 429:
                raise RateLimitError(parse_retry_after(response))
            response.raise_for_status()
    return response
