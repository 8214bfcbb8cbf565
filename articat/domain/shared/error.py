"""Error hierarchy for articat.

Error layers:
- ArticatError: Base class for all articat errors
- DomainError: Business rule violations raised when an outcome is unwrapped
- InfrastructureError: Misconfiguration and wiring failures

Expected conditions (missing article, restore of a live article) are reported
as outcomes, see ``articat.domain.shared.outcome``. These exceptions are only
raised when a caller unwraps a failed outcome or when the code is misused.
"""


class ArticatError(Exception):
    """Base class for all articat errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(ArticatError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Article not found."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class InvalidStateError(DomainError):
    """Operation not allowed in current state."""


class ConflictError(DomainError):
    """Article already exists under the requested id."""


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(ArticatError):
    """Base class for infrastructure/system errors."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
