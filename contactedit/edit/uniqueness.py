"""
Phone and email uniqueness checks for an edited person.

The checks run in a fixed priority order: a joint phone-and-email clash is
reported before either single clash.
"""

from typing import Callable, List, Optional, Protocol

from ..core.person import Person
from .exceptions import (
    DuplicateEmailError,
    DuplicatePhoneAndEmailError,
    DuplicatePhoneError,
)


class Model(Protocol):
    """Store operations the edit command relies on."""

    def get_filtered_person_list(self) -> List[Person]:
        ...

    def update_filtered_person_list(self, predicate: Callable[[Person], bool]) -> None:
        ...

    def has_phone(self, person: Person, excluding: Optional[Person] = None) -> bool:
        ...

    def has_email(self, person: Person, excluding: Optional[Person] = None) -> bool:
        ...

    def set_person(self, target: Person, edited: Person) -> None:
        ...


def check_uniqueness(model: Model, original: Person, edited: Person) -> None:
    """
    Reject an edited person whose phone or email belongs to someone else.

    Args:
        model: Store to query; records identical to ``original`` are ignored
        original: Person as currently stored
        edited: Candidate replacement

    Raises:
        DuplicatePhoneAndEmailError: Identity changed and both values clash
        DuplicatePhoneError: Phone changed and clashes
        DuplicateEmailError: Email changed and clashes
    """
    phone_exists = model.has_phone(edited, excluding=original)
    email_exists = model.has_email(edited, excluding=original)

    if not original.is_same_person(edited) and phone_exists and email_exists:
        raise DuplicatePhoneAndEmailError()
    elif not original.is_phone_present_and_same(edited) and phone_exists:
        raise DuplicatePhoneError()
    elif not original.is_email_present_and_same(edited) and email_exists:
        raise DuplicateEmailError()
