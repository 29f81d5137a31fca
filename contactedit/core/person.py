"""Person class for representing contacts in the address book."""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from .module_role import ModuleRoleMap


@dataclass(frozen=True, slots=True)
class Person:
    """Immutable snapshot of one contact.

    Attributes:
        name: Full name, never empty
        phone: Phone number, if recorded
        email: Email address, if recorded
        address: Postal address, if recorded
        tags: Free-form labels
        module_roles: Modules the person takes, tutors or teaches
        description: Free-text note, if recorded
    """

    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    tags: FrozenSet[str] = field(default_factory=frozenset)
    module_roles: ModuleRoleMap = field(default_factory=ModuleRoleMap)
    description: Optional[str] = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Name must not be empty")
        object.__setattr__(self, 'tags', frozenset(self.tags))

    def __str__(self) -> str:
        return format_person(self)

    def is_same_person(self, other: 'Person') -> bool:
        """Check whether two records describe the same person.

        Two records are the same person when they share a phone number or
        an email address. Names are not unique in an address book.
        """
        return (
            other is self
            or self.is_phone_present_and_same(other)
            or self.is_email_present_and_same(other)
        )

    def is_phone_present_and_same(self, other: 'Person') -> bool:
        """Check that both records hold a phone number and it is equal."""
        return self.phone is not None and self.phone == other.phone

    def is_email_present_and_same(self, other: 'Person') -> bool:
        """Check that both records hold an email and it is equal."""
        return self.email is not None and self.email == other.email


def format_tags(tags) -> str:
    return ''.join(f"[{tag}]" for tag in sorted(tags))


def format_person(person: Person) -> str:
    """Render a person for user feedback.

    Absent optional fields are left out entirely.

    Args:
        person: Person to render

    Returns:
        One-line summary, e.g. "Alex Yeoh; Phone: 87438807; Tags: [friends]"
    """
    parts = [person.name]
    if person.phone is not None:
        parts.append(f"Phone: {person.phone}")
    if person.email is not None:
        parts.append(f"Email: {person.email}")
    if person.address is not None:
        parts.append(f"Address: {person.address}")
    parts.append(f"Tags: {format_tags(person.tags)}")
    parts.append(f"Modules: {person.module_roles}")
    if person.description is not None:
        parts.append(f"Description: {person.description}")
    return '; '.join(parts)
