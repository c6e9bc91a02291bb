"""
Fixtures pytest partagees pour les tests graphql-moviedb.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock du cache TTL (APICache)
- Settings de test avec chemins temporaires
- Clients TMDB v3/v4 et contexte GraphQL sans cache
"""

from pathlib import Path
from unittest.mock import AsyncMock

import jwt
import pytest

from graphql_moviedb.adapters.api.cache import APICache
from graphql_moviedb.adapters.api.moviedb_v3 import MovieDatabaseV3
from graphql_moviedb.adapters.api.moviedb_v4 import MovieDatabaseV4
from graphql_moviedb.adapters.graphql.context import GraphQLContext
from graphql_moviedb.config import Settings
from tests.fixtures.tmdb_responses import TMDB_V4_ACCOUNT_ID


def make_access_token(account_id: str = TMDB_V4_ACCOUNT_ID) -> str:
    """Token d'acces utilisateur v4 (JWT signe avec une cle de test)."""
    claims = {"sub": account_id, "scopes": ["api_read", "api_write"], "version": 1}
    return jwt.encode(claims, "graphql-moviedb-test-signing-key-0001", algorithm="HS256")


@pytest.fixture
def mock_cache() -> AsyncMock:
    """
    Mock de APICache pour les tests.

    Cache vide par defaut (get retourne None).
    """
    cache = AsyncMock(spec=APICache)
    cache.get.return_value = None
    return cache


@pytest.fixture
def access_token() -> str:
    return make_access_token()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec des chemins temporaires.

    Aucune variable d'environnement ni fichier .env n'est lu.
    """
    return Settings(
        _env_file=None,
        tmdb_api_key="test_api_key",
        tmdb_api_read_access_token="test_read_token",
        cache_dir=tmp_path / "cache" / "api",
        session_cache_dir=tmp_path / "cache" / "sessions",
        log_file=tmp_path / "logs" / "test.log",
    )


@pytest.fixture
def v3() -> MovieDatabaseV3:
    """Client v3 sans cache ni token utilisateur."""
    return MovieDatabaseV3(api_key="test_api_key")


@pytest.fixture
def v4() -> MovieDatabaseV4:
    """Client v4 avec le seul token de lecture de l'application."""
    return MovieDatabaseV4(read_access_token="test_read_token")


@pytest.fixture
def context(v3: MovieDatabaseV3, v4: MovieDatabaseV4) -> GraphQLContext:
    """Contexte GraphQL anonyme."""
    return GraphQLContext(v3=v3, v4=v4)


@pytest.fixture
def user_context(access_token: str) -> GraphQLContext:
    """Contexte GraphQL d'un utilisateur identifie par son token v4."""
    return GraphQLContext(
        v3=MovieDatabaseV3(api_key="test_api_key", user_access_token=access_token),
        v4=MovieDatabaseV4(read_access_token="test_read_token", user_access_token=access_token),
    )
