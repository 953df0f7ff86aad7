"""Unified exception taxonomy.

Provides a shared base exception hierarchy for every stage of a diameter
measurement (extraction, hull, primitives, calipers). Every domain
exception inherits from ``DiameterError`` and carries structured context
fields so callers can log and classify failures consistently.

Taxonomy categories
-------------------
- ``ValidationError``   — input/contract violations in the caller's data.
- ``PermanentError``    — unrecoverable domain failures.
- ``ContractError``     — collaborator output that breaks its contract.
"""

from __future__ import annotations


class DiameterError(Exception):
    """Base exception for all diameter-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Stage where the error occurred
            (e.g. ``"extract_coords"``, ``"hull"``, ``"diameter"``).
        code: Machine-readable error code (e.g. ``"EMPTY_RING"``).
        category: Taxonomy category (``"validation"``, ``"permanent"``
            or ``"contract"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    category: str = "permanent"

    def __init__(self, message: str = "", *, stage: str = "", code: str = "") -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(DiameterError):
    """Input or domain-model validation failure."""

    category = "validation"


class PermanentError(DiameterError):
    """Unrecoverable domain failure."""

    category = "permanent"


class ContractError(DiameterError):
    """A collaborator returned data that breaks its contract."""

    category = "contract"


# ---------------------------------------------------------------------------
# Domain exceptions shared across packages
# ---------------------------------------------------------------------------


class InvalidInputError(ValidationError):
    """Raised when a ring or feature cannot be measured as supplied.

    Covers empty rings, malformed coordinates and unsupported GeoJSON
    structures.
    """

    default_stage = "diameter"
    default_code = "INVALID_INPUT"
