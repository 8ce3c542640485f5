"""Contact value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Contact:
    """Immutable record of a person's name and phone number.

    Contacts have no identity of their own: two contacts with the same
    fields compare equal, and a registry may hold several of them.
    """

    first_name: str
    last_name: str
    phone_number: str
