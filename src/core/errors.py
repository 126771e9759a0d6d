"""
Type d'erreur unique de l'application.

Une seule exception, AppError, portant un ErrorKind. La table _KIND_TABLE
associe chaque kind à son code public et à son statut HTTP. Les frontières
(agrégateur de notes, gestionnaire d'erreurs web) testent explicitement
error.kind au lieu de s'appuyer sur une hiérarchie de sous-classes.

Seuls NOT_FOUND, VALIDATION, STORAGE_UNAVAILABLE et INTERNAL atteignent le
client HTTP. SOURCE_UNAVAILABLE (réponse inexploitable d'une source de notes)
est converti en note absente par la source elle-même, et
UNEXPECTED_SOURCE_FAILURE est absorbé par l'agrégateur de notes.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """Variantes d'erreur connues de l'application."""

    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    STORAGE_UNAVAILABLE = "storage_unavailable"
    SOURCE_UNAVAILABLE = "source_unavailable"
    UNEXPECTED_SOURCE_FAILURE = "unexpected_source_failure"
    INTERNAL = "internal"


# kind -> (code public, statut HTTP)
_KIND_TABLE: dict[ErrorKind, tuple[str, int]] = {
    ErrorKind.NOT_FOUND: ("NOT_FOUND", 404),
    ErrorKind.VALIDATION: ("VALIDATION_ERROR", 400),
    ErrorKind.STORAGE_UNAVAILABLE: ("DB_ERROR", 500),
    ErrorKind.SOURCE_UNAVAILABLE: ("SOURCE_UNAVAILABLE", 502),
    ErrorKind.UNEXPECTED_SOURCE_FAILURE: ("EXTERNAL_API_ERROR", 502),
    ErrorKind.INTERNAL: ("INTERNAL_SERVER_ERROR", 500),
}


class AppError(Exception):
    """
    Erreur applicative typée par son kind.

    Attributes:
        kind: Variante de l'erreur
        message: Message lisible, exposé tel quel au client pour les erreurs remontées
        context: Données additionnelles pour les logs (jamais exposées)
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.context = context or {}
        super().__init__(message)

    @property
    def code(self) -> str:
        """Code public de l'erreur (ex: 'NOT_FOUND')."""
        return _KIND_TABLE[self.kind][0]

    @property
    def status_code(self) -> int:
        """Statut HTTP associé au kind."""
        return _KIND_TABLE[self.kind][1]

    def to_dict(self) -> dict[str, str]:
        """Corps 'error' de l'enveloppe JSON de réponse."""
        return {"code": self.code, "message": self.message}

    def __repr__(self) -> str:
        return f"AppError(kind={self.kind.name}, message={self.message!r})"

    @classmethod
    def not_found(cls, message: str, **context: Any) -> "AppError":
        return cls(ErrorKind.NOT_FOUND, message, context)

    @classmethod
    def validation(cls, message: str, **context: Any) -> "AppError":
        return cls(ErrorKind.VALIDATION, message, context)

    @classmethod
    def storage_unavailable(cls, message: str, **context: Any) -> "AppError":
        return cls(ErrorKind.STORAGE_UNAVAILABLE, message, context)

    @classmethod
    def source_unavailable(cls, message: str, **context: Any) -> "AppError":
        return cls(ErrorKind.SOURCE_UNAVAILABLE, message, context)

    @classmethod
    def unexpected_source_failure(cls, message: str, **context: Any) -> "AppError":
        return cls(ErrorKind.UNEXPECTED_SOURCE_FAILURE, message, context)

    @classmethod
    def internal(cls, message: str, **context: Any) -> "AppError":
        return cls(ErrorKind.INTERNAL, message, context)


def status_for(kind: ErrorKind) -> int:
    """Retourne le statut HTTP d'un kind sans instancier d'erreur."""
    return _KIND_TABLE[kind][1]
