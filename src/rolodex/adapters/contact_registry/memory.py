"""In-memory ContactRegistry implementation."""

import logging

from rolodex.domain.contact import Contact
from rolodex.domain.errors import InvalidContactError
from rolodex.interfaces.contact_registry import ContactRegistry

logger = logging.getLogger(__name__)


class InMemoryContactRegistry(ContactRegistry):
    """List-backed registry; contents live as long as the instance does.

    Not thread-safe. Callers sharing an instance across threads must guard it
    with their own lock.
    """

    def __init__(self) -> None:
        self._contacts: list[Contact] = []

    def add_contact(
        self, first_name: str | None, last_name: str | None, phone_number: str | None
    ) -> None:
        # checked in this order; the first missing field wins
        if first_name is None:
            raise InvalidContactError("First Name")
        if last_name is None:
            raise InvalidContactError("Last Name")
        if phone_number is None:
            raise InvalidContactError("Phone Number")

        self._contacts.append(Contact(first_name, last_name, phone_number))
        logger.debug(
            "Added contact %s %s (%d total)",
            first_name,
            last_name,
            len(self._contacts),
        )

    def get_all_contacts(self) -> tuple[Contact, ...]:
        return tuple(self._contacts)
