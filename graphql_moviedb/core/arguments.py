"""
Normalisation des arguments GraphQL vers les parametres REST TMDB.

Deux transformations:
- normalize_args : conversion recursive des cles (camelCase -> snake_case,
  operateurs suffixes -> operateurs pointes)
- to_rest_sort : traduction d'un couple (sortBy, sortOrder) en une chaine
  REST "champ.ordre", avec substitution des champs selon le type de media

Usage:
    normalize_args({"voteAverage_GTE": 8.5})
    # => {"vote_average.gte": 8.5}

    normalize_args({"sortBy": "RELEASE_DATE", "sortOrder": "DESC"}, MediaType.TV)
    # => {"sort_by": "first_air_date.desc"}
"""

from enum import Enum
from typing import Any, Mapping, Optional

from graphql_moviedb.core.media import MediaType
from graphql_moviedb.core.naming import OPERATORS, constant_case, to_rest_key

DEFAULT_SORT_ORDER = "desc"

# Substitutions appliquees quel que soit le type de media
SORT_SUBSTITUTIONS = {"DATE_ADDED": "CREATED_AT"}

# Substitutions specifiques aux series (les series ont un "name" et une
# "first_air_date" la ou les films ont un "title" et une "release_date")
TV_SORT_SUBSTITUTIONS = {
    "TITLE": "NAME",
    "RELEASE_DATE": "FIRST_AIR_DATE",
}

_REVERSE_SORT_SUBSTITUTIONS = {v: k for k, v in SORT_SUBSTITUTIONS.items()}


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def to_rest_sort(
    sort_by: Any,
    sort_order: Any = None,
    media_type: Any = None,
) -> str:
    """
    Traduit un tri GraphQL en parametre REST sort_by.

    sort_by peut porter l'ordre lui-meme ("RELEASE_DATE__DESC",
    "releaseDate_DESC" ou "release_date.desc") ; un sort_order explicite
    l'emporte alors sur cet ordre.
    Sans ordre du tout, l'ordre par defaut est descendant.

    Args:
        sort_by: Champ de tri (enum ou chaine)
        sort_order: Ordre de tri ASC/DESC (optionnel)
        media_type: Type de media, determine les substitutions de champs

    Returns:
        Chaine REST, ex: "first_air_date.desc"
    """
    field = str(_enum_value(sort_by))
    order = _enum_value(sort_order)

    # Un ordre explicite l'emporte sur celui porte par sort_by
    field, _, suffix = to_rest_key(field).partition(".")
    if suffix in OPERATORS and order is None:
        order = suffix

    field = constant_case(field)
    field = SORT_SUBSTITUTIONS.get(field, field)
    if media_type is not None and MediaType.parse(media_type) is MediaType.TV:
        field = TV_SORT_SUBSTITUTIONS.get(field, field)

    order = str(order or DEFAULT_SORT_ORDER).lower()
    return f"{field.lower()}.{order}"


def to_graphql_sort(rest_sort: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    """
    Traduit une chaine REST "champ.ordre" en couple (sortBy, sortOrder) GraphQL.

    Exemple: "created_at.asc" -> ("DATE_ADDED", "ASC")
    """
    if not rest_sort:
        return None, None
    field, _, order = rest_sort.partition(".")
    field = constant_case(field)
    field = _REVERSE_SORT_SUBSTITUTIONS.get(field, field)
    return field, (order.upper() or None)


def normalize_args(
    args: Optional[Mapping[str, Any]],
    media_type: Any = None,
) -> dict[str, Any]:
    """
    Convertit recursivement des arguments GraphQL en parametres REST.

    Les mappings imbriques sont normalises recursivement ; les sequences et
    scalaires sont conserves tels quels (les membres d'enum sont remplaces
    par leur valeur). Le couple sortBy/sortOrder est traduit par
    to_rest_sort en une cle unique sort_by ; sans sortBy, aucune cle
    sort_by n'est ajoutee.

    Args:
        args: Arguments GraphQL (None accepte)
        media_type: Type de media pour la traduction du tri

    Returns:
        Nouveau dictionnaire au format REST ({} si args est vide)
    """
    if not args:
        return {}

    result: dict[str, Any] = {}
    sort_by = sort_order = None

    for key, value in args.items():
        rest_key = to_rest_key(key)
        if rest_key == "sort_by":
            sort_by = value
            continue
        if rest_key == "sort_order":
            sort_order = value
            continue
        if isinstance(value, Mapping):
            value = normalize_args(value, media_type)
        else:
            value = _enum_value(value)
        result[rest_key] = value

    if sort_by is not None:
        result["sort_by"] = to_rest_sort(sort_by, sort_order, media_type)

    return result
