"""Domain layer for ROLODEX.

Contains the business rules: the `Contact` value object and the domain
errors raised when those rules are violated. This package is
technology-agnostic.

Dependency rule: do not import from `rolodex.adapters` or `rolodex.entrypoints`.
"""

from .contact import Contact
from .errors import DomainError, InvalidContactError

__all__ = ["Contact", "DomainError", "InvalidContactError"]
