"""
Types de media et transformations des credits.

MediaType est l'etiquette fermee qui distingue les variantes de l'union
Movie | Show | Person | Company. Elle est construite a la frontiere depuis
les differentes representations rencontrees (chaine REST "movie"/"tv",
nom de type GraphQL "Movie"/"Show", nom d'enum "MOVIE"/"TV") pour qu'une
seule representation canonique circule dans le reste du code.
"""

from enum import Enum
from typing import Any, Mapping

from graphql_moviedb.core.exceptions import UnsupportedMediaTypeError


class MediaType(Enum):
    """Type de media TMDB.

    La valeur est le segment de chemin REST correspondant.

    Valeurs:
        MOVIE: Film
        TV: Serie TV (type GraphQL "Show")
        PERSON: Personne (acteur, realisateur...)
        COMPANY: Societe de production
    """

    MOVIE = "movie"
    TV = "tv"
    PERSON = "person"
    COMPANY = "company"

    @property
    def rest_path(self) -> str:
        """Segment de chemin REST (ex: "tv" pour /tv/{id})."""
        return self.value

    @property
    def typename(self) -> str:
        """Nom du type GraphQL correspondant."""
        return _TYPENAMES[self]

    @classmethod
    def parse(cls, value: Any) -> "MediaType":
        """
        Construit un MediaType depuis n'importe quelle representation connue.

        Accepte un MediaType, une valeur REST ("movie", "tv"), un nom d'enum
        ("MOVIE", "TV") ou un nom de type GraphQL ("Movie", "Show").

        Raises:
            UnsupportedMediaTypeError: Si la valeur n'est pas reconnue
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized == "show":
                return cls.TV
            for member in cls:
                if normalized == member.value:
                    return member
        raise UnsupportedMediaTypeError(value)


_TYPENAMES = {
    MediaType.MOVIE: "Movie",
    MediaType.TV: "Show",
    MediaType.PERSON: "Person",
    MediaType.COMPANY: "Company",
}


class CreditKind(Enum):
    """Nature d'un credit : role d'acteur ou poste technique."""

    CAST = "cast"
    CREW = "crew"


def credit_kind(credit: Mapping[str, Any]) -> CreditKind:
    """
    Determine si un credit est un role (CAST) ou un poste (CREW).

    Un credit sans job, ou dont le job/departement commence par "act",
    est un role d'acteur.
    """
    job = credit.get("job")
    if not job or job.lower().startswith("act"):
        return CreditKind.CAST
    return CreditKind.CREW


def filmography_credit(result: Mapping[str, Any]) -> dict[str, Any]:
    """
    Transforme un element de /person/{id}/combined_credits en credit.

    Les champs propres au credit (character, job, department) sont extraits,
    l'element complet devient le media credite.
    """
    credit = {
        key: result[key]
        for key in ("character", "job", "department")
        if key in result
    }
    credit["media"] = result
    return credit
