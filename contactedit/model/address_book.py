"""In-memory address book holding the people being edited."""

import logging
from typing import Callable, Iterable, List, Optional

from ..core.person import Person


logger = logging.getLogger(__name__)


class AddressBook:
    """
    Ordered list of people plus the currently displayed (filtered) view.

    Phone and email lookups skip a given record, so a person never clashes
    with the version of themselves being replaced.
    """

    def __init__(self, persons: Optional[Iterable[Person]] = None):
        self._persons: List[Person] = list(persons or [])
        self._predicate: Callable[[Person], bool] = lambda person: True

    def __len__(self) -> int:
        return len(self._persons)

    @property
    def persons(self) -> List[Person]:
        return list(self._persons)

    def get_filtered_person_list(self) -> List[Person]:
        return [p for p in self._persons if self._predicate(p)]

    def update_filtered_person_list(self, predicate: Callable[[Person], bool]) -> None:
        self._predicate = predicate

    def has_phone(self, person: Person, excluding: Optional[Person] = None) -> bool:
        """Check whether another person already holds this person's phone.

        Args:
            person: Person whose phone to look for
            excluding: Record to skip, usually the one being edited

        Returns:
            True if some other record has the same phone number
        """
        if person.phone is None:
            return False
        return any(
            p.phone == person.phone
            for p in self._persons
            if p is not excluding
        )

    def has_email(self, person: Person, excluding: Optional[Person] = None) -> bool:
        """Check whether another person already holds this person's email."""
        if person.email is None:
            return False
        return any(
            p.email == person.email
            for p in self._persons
            if p is not excluding
        )

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited`` in place.

        Raises:
            KeyError: If target is not in the address book
        """
        for i, person in enumerate(self._persons):
            if person is target:
                self._persons[i] = edited
                logger.debug(f"Replaced person at position {i}")
                return
        raise KeyError(f"Person not found in address book: {target.name}")
