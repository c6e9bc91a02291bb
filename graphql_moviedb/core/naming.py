"""
Conversion des noms entre les conventions REST (TMDB) et GraphQL.

TMDB utilise le snake_case et des operateurs de filtre/tri suffixes par un
point (``vote_average.gte``, ``release_date.desc``). Le schema GraphQL utilise
le camelCase et des operateurs suffixes par un underscore
(``voteAverage_GTE``, ``releaseDate_DESC``).

Usage:
    to_rest_key("voteAverage_GTE")   # => "vote_average.gte"
    to_rest_key("vote_average.gte")  # => "vote_average.gte" (idempotent)
    to_graphql_key("genre_ids")      # => "genreIds"
    constant_case("Behind the Scenes")  # => "BEHIND_THE_SCENES"
"""

import re

# Operateurs reconnus en fin de cle
OPERATORS = frozenset({"gte", "lte", "desc", "asc"})

# Decoupage en mots : acronymes, mots capitalises, minuscules, nombres
_WORDS = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")
_OPERATOR_SUFFIX = re.compile(r"_(gte|lte|desc|asc)$")
_SEPARATORS = re.compile(r"[_\W]+")


def _snake_case(text: str) -> str:
    """Convertit un texte en snake_case sans traitement des operateurs."""
    return "_".join(word.lower() for word in _WORDS.findall(text))


def to_rest_key(key: str) -> str:
    """
    Convertit une cle GraphQL en cle REST TMDB.

    Le suffixe d'operateur final (_GTE, _LTE, _DESC, _ASC, insensible a la
    casse) devient un suffixe pointe. Une cle deja en snake_case ou deja
    pointee est retournee inchangee.

    Args:
        key: Nom de champ ou d'argument (camelCase, snake_case ou pointe)

    Returns:
        La cle au format REST
    """
    if not isinstance(key, str) or not key:
        return key

    if "." in key:
        head, _, suffix = key.rpartition(".")
        if suffix.lower() in OPERATORS:
            return f"{_snake_case(head)}.{suffix.lower()}"
        return ".".join(_snake_case(part) for part in key.split("."))

    return _OPERATOR_SUFFIX.sub(lambda m: f".{m.group(1)}", _snake_case(key))


def to_graphql_key(key: str) -> str:
    """
    Convertit une cle REST (snake_case) en cle GraphQL (camelCase).

    Les cles deja en camelCase sont retournees inchangees.
    """
    if not isinstance(key, str):
        return key

    parts = [part for part in _SEPARATORS.split(key) if part]
    if not parts:
        return key

    first, rest = parts[0], parts[1:]
    head = first.lower() if first.isupper() else first[:1].lower() + first[1:]
    tail = "".join(
        part[:1].upper() + (part[1:].lower() if part.isupper() else part[1:])
        for part in rest
    )
    return head + tail


def constant_case(text: str) -> str:
    """Convertit un texte en CONSTANT_CASE (ex: "Behind the Scenes" -> "BEHIND_THE_SCENES")."""
    if not text:
        return text
    return "_".join(word.upper() for word in _WORDS.findall(text))
