"""
Couche domaine (core).

Transformations pures entre les conventions REST de TMDB et les conventions
GraphQL, et resolution des champs de detail. Cette couche n'a AUCUNE
dependance vers l'infrastructure (HTTP, cache, framework GraphQL).

Modules :
- naming : conversion des cles (to_rest_key, to_graphql_key, constant_case)
- arguments : normalisation des arguments et traduction du tri
- responses : normalisation des reponses et separation {results, meta}
- details : resolution a la demande des champs de detail
- media : types de media et transformations des credits
- ports : interfaces des adaptateurs (cache, sessions)
- exceptions : erreurs du domaine et leur classification
"""

from graphql_moviedb.core.arguments import normalize_args, to_graphql_sort, to_rest_sort
from graphql_moviedb.core.details import get_field
from graphql_moviedb.core.media import CreditKind, MediaType, credit_kind, filmography_credit
from graphql_moviedb.core.naming import constant_case, to_graphql_key, to_rest_key
from graphql_moviedb.core.responses import EXCLUDED_KEYS, normalize_response, split_envelope

__all__ = [
    "EXCLUDED_KEYS",
    "CreditKind",
    "MediaType",
    "constant_case",
    "credit_kind",
    "filmography_credit",
    "get_field",
    "normalize_args",
    "normalize_response",
    "split_envelope",
    "to_graphql_key",
    "to_graphql_sort",
    "to_rest_key",
    "to_rest_sort",
]
