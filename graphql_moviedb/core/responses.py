"""
Normalisation des reponses REST TMDB vers la forme GraphQL.

- normalize_response : conversion recursive des cles en camelCase
- split_envelope : separation d'une reponse paginee en {results, meta}
"""

from typing import Any, Mapping

from graphql_moviedb.core.naming import to_graphql_key

# Cles conservees telles quelles : ce sont des codes (langue ISO 639-1,
# pays ISO 3166-1) exposes sous ce nom dans le schema GraphQL.
EXCLUDED_KEYS = frozenset({"iso_639_1", "iso_3166_1"})


def graphql_key(key: str) -> str:
    """Retourne le nom GraphQL d'une cle REST, en respectant EXCLUDED_KEYS."""
    return key if key in EXCLUDED_KEYS else to_graphql_key(key)


def normalize_response(data: Any) -> Any:
    """
    Convertit recursivement toutes les cles d'une reponse JSON en camelCase.

    Descend dans les mappings et les listes ; les cles de EXCLUDED_KEYS ne
    sont pas transformees. Les scalaires sont retournes tels quels.
    """
    if isinstance(data, Mapping):
        return {graphql_key(key): normalize_response(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [normalize_response(item) for item in data]
    return data


def split_envelope(response: Any) -> Any:
    """
    Separe une reponse de liste en resultats et meta-donnees de pagination.

    Une reponse sans cle "results" est un element unique : elle est
    retournee telle quelle. Sinon toutes les autres cles (page, totalPages,
    totalResults...) sont regroupees sous "meta".

    Example:
        split_envelope({"results": [...], "page": 1, "totalResults": 20})
        # => {"results": [...], "meta": {"page": 1, "totalResults": 20}}
    """
    if not isinstance(response, Mapping) or "results" not in response:
        return response
    meta = {key: value for key, value in response.items() if key != "results"}
    return {"results": response["results"], "meta": meta}
