"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour le serveur GraphQL et
la CLI. Les caches et le stockage des sessions sont partages par toutes les
requetes ; les clients TMDB sont crees pour chaque operation GraphQL.
"""

from dependency_injector import containers, providers

from .adapters.api.cache import APICache
from .adapters.api.moviedb_v3 import MovieDatabaseV3
from .adapters.api.moviedb_v4 import MovieDatabaseV4
from .adapters.api.sessions import CachedSessionStore
from .config import Settings


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        v3 = container.moviedb_v3(user_access_token=token)
        v4 = container.moviedb_v4(user_access_token=token)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Cache des reponses GET - Singleton partage entre toutes les requetes
    api_cache = providers.Singleton(
        APICache,
        cache_dir=config.provided.cache_dir,
        default_ttl=config.provided.response_cache_ttl,
    )

    # Cache des sessions v3 - instance distincte (TTL et repertoire propres)
    session_cache = providers.Singleton(
        APICache,
        cache_dir=config.provided.session_cache_dir,
        default_ttl=config.provided.session_cache_ttl,
    )

    session_store = providers.Singleton(
        CachedSessionStore,
        cache=session_cache,
        ttl=config.provided.session_cache_ttl,
    )

    # Clients API - Factory : une instance par operation GraphQL
    # Utiliser: container.moviedb_v3(user_access_token=token)
    moviedb_v3 = providers.Factory(
        MovieDatabaseV3,
        api_key=config.provided.tmdb_api_key,
        cache=api_cache,
        session_store=session_store,
        timeout=config.provided.request_timeout,
    )

    moviedb_v4 = providers.Factory(
        MovieDatabaseV4,
        read_access_token=config.provided.tmdb_api_read_access_token,
        cache=api_cache,
        timeout=config.provided.request_timeout,
    )
