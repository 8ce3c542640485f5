"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Contact related errors
# ============================================================================


class InvalidContactError(DomainError):
    """Raised when a contact is missing one of its required fields."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} cannot be null")
        self.field = field
