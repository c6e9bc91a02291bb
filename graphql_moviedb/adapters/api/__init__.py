"""
Clients de l'API REST TMDB.

- MovieDatabaseV3: details, listes predefinies, recherche, discover, genres,
  compte utilisateur (session v3 obtenue a partir du token v4)
- MovieDatabaseV4: listes utilisateur (lecture et mutations)

Infrastructure partagee:
- APICache: Cache persistant avec TTL (reponses GET, sessions)
- CachedSessionStore: Sessions v3 memorisees par token d'acces
- RateLimitError: Exception pour les erreurs 429
- request_with_retry: Requete HTTP relancee sur 429 (Retry-After ou backoff)
"""

from graphql_moviedb.adapters.api.cache import APICache
from graphql_moviedb.adapters.api.moviedb_v3 import MovieDatabaseV3
from graphql_moviedb.adapters.api.moviedb_v4 import MovieDatabaseV4
from graphql_moviedb.adapters.api.retry import RateLimitError, request_with_retry
from graphql_moviedb.adapters.api.sessions import CachedSessionStore

__all__ = [
    "APICache",
    "CachedSessionStore",
    "MovieDatabaseV3",
    "MovieDatabaseV4",
    "RateLimitError",
    "request_with_retry",
]
