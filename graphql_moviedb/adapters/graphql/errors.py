"""
Classification et formatage des erreurs GraphQL.

Chaque erreur recoit un code grossier (extensions.code) :
- les erreurs du domaine portent leur propre code (UNAUTHENTICATED,
  BAD_USER_INPUT, INTERNAL_SERVER_ERROR)
- les echecs de l'API TMDB (httpx) et toute autre exception sont
  INTERNAL_SERVER_ERROR
- les erreurs sans exception d'origine (requete invalide) sont
  GRAPHQL_VALIDATION_FAILED

En production seuls message et code sont renvoyes ; en developpement la
reponse garde locations, path et le statut HTTP amont, et l'erreur complete
est journalisee.
"""

from typing import Any, Optional

import httpx
from graphql import GraphQLError
from loguru import logger

from graphql_moviedb.adapters.api.moviedb_client import error_message, upstream_status
from graphql_moviedb.core.exceptions import MovieDatabaseError

INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
GRAPHQL_VALIDATION_FAILED = "GRAPHQL_VALIDATION_FAILED"


def error_code(original_error: Optional[BaseException]) -> str:
    """Code de classification d'une erreur a partir de son exception d'origine."""
    if original_error is None:
        return GRAPHQL_VALIDATION_FAILED
    if isinstance(original_error, MovieDatabaseError):
        return original_error.code
    return INTERNAL_SERVER_ERROR


def public_message(error: GraphQLError) -> str:
    """Message d'erreur sans detail interne (URL de requete, cle d'API)."""
    original = error.original_error
    if isinstance(original, httpx.HTTPError):
        return error_message(original)
    return error.message


def format_error(error: GraphQLError, development: bool = False) -> dict[str, Any]:
    """
    Formate une erreur GraphQL pour la reponse HTTP.

    Args:
        error: Erreur produite par l'execution
        development: Mode developpement (detail complet et journalisation)

    Returns:
        Dictionnaire {message, extensions: {code}} en production,
        {message, locations, path, extensions} en developpement
    """
    original = error.original_error
    code = error_code(original)

    if not development:
        return {"message": public_message(error), "extensions": {"code": code}}

    formatted = dict(error.formatted)
    extensions = dict(formatted.get("extensions") or {})
    extensions["code"] = code
    status = upstream_status(original)
    if status is not None:
        extensions["upstreamStatus"] = status
    formatted["extensions"] = extensions

    logger.opt(exception=original).error(
        "Erreur GraphQL: {}", error.message, code=code, path=error.path
    )
    return formatted
