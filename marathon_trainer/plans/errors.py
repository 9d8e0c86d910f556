"""Domain-specific errors for plan generation.

Every error raised by the plan core derives from PlanError so transport
layers can map the whole family to a client error in one place.
"""


class PlanError(Exception):
    """Base exception for all plan errors."""

    pass


class ValidationError(PlanError):
    """Raised when runner input is rejected (hard stop, no retry)."""

    pass


class ComputationError(PlanError):
    """Raised when a value cannot be computed, e.g. a malformed duration."""

    pass


class PlanExportError(PlanError):
    """Raised when an exported plan file cannot be read back."""

    pass


class PlanStoreError(PlanError):
    """Raised when a stored plan cannot be decoded."""

    pass
