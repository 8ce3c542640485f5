"""Contact registry interface definitions."""

import abc
from collections.abc import Sequence

from rolodex.domain.contact import Contact


class ContactRegistry(abc.ABC):
    """Abstract base class for an ordered collection of contacts."""

    @abc.abstractmethod
    def add_contact(
        self, first_name: str | None, last_name: str | None, phone_number: str | None
    ) -> None:
        """Validate the fields and append a new contact to the registry.

        Fields are checked in order (first name, last name, phone number) and
        the first missing one determines the error. Empty strings are accepted;
        only ``None`` is rejected.

        Args:
            first_name: The contact's first name.
            last_name: The contact's last name.
            phone_number: The contact's phone number.

        Raises:
            InvalidContactError: If any field is ``None``. The registry is left
                unchanged.
        """

    @abc.abstractmethod
    def get_all_contacts(self) -> Sequence[Contact]:
        """Return every contact held by the registry, in insertion order.

        Returns:
            Sequence[Contact]: A read-only view of the contacts. Empty when
            nothing has been added; never ``None``.
        """
