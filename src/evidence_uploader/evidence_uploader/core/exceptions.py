from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations (HTTP 400)."""

    default_message = "Solicitud inválida."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(DomainError):
    """Raised when a submission is incomplete or violates upload rules."""


class MissingFieldsError(ValidationError):
    default_message = "Faltan campos requeridos."


class InvalidKindError(ValidationError):
    default_message = "Tipo inválido."


class InvalidContentError(ValidationError):
    default_message = "Contenido inválido."


class ContentTooLargeError(ValidationError):
    default_message = "Archivo demasiado grande."


class DisallowedExtensionError(ValidationError):
    default_message = "Extensión no permitida."


class UnknownEmployeeError(DomainError):
    """The directory is readable but does not list the employee."""

    default_message = "Empleado no válido."


class BackendError(Exception):
    """Any failure talking to the version-control backend (HTTP 500)."""


class BranchCreationError(BackendError):
    """The evidence branch could not be created (usually: it already exists)."""


class DirectoryUnavailableError(BackendError):
    """The employee directory snapshot could not be read or parsed."""


class ConfigurationError(Exception):
    """Backend credentials or repository coordinates are missing."""
