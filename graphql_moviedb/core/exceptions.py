"""
Exceptions du domaine.

Chaque exception porte un code de classification expose dans la reponse
GraphQL (extensions.code), ce qui permet aux clients de distinguer une
erreur d'authentification d'une erreur generique.
"""

from typing import Any


class MovieDatabaseError(Exception):
    """Exception de base pour toutes les erreurs de la facade."""

    code = "INTERNAL_SERVER_ERROR"


class AuthenticationError(MovieDatabaseError):
    """Levee quand le token d'acces utilisateur est absent ou rejete."""

    code = "UNAUTHENTICATED"


class UnsupportedMediaTypeError(MovieDatabaseError, ValueError):
    """Levee quand un type de media n'est pas reconnu."""

    code = "BAD_USER_INPUT"

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Unsupported media type: {value!r}")
