"""
Sparse edits to a person.

Each slot of an EditPersonDescriptor is either UNSET (keep the original
value) or holds the replacement value. The tag slot may also be CLEAR,
which empties the tag set.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Literal, Optional, Union

from .role_operation import ModuleRoleOperation


class Slot(Enum):
    """Markers for descriptor slots that carry no value."""
    UNSET = "unset"
    CLEAR = "clear"

    def __repr__(self) -> str:
        return self.name


UNSET = Slot.UNSET
CLEAR = Slot.CLEAR

# Scalar fields cannot be cleared, only overridden
ScalarSlot = Union[str, Literal[Slot.UNSET]]
TagSlot = Union[FrozenSet[str], Slot]

SCALAR_FIELDS = ('name', 'phone', 'email', 'address', 'description')


@dataclass(frozen=True)
class EditPersonDescriptor:
    """Immutable set of field overrides to apply to a person."""

    name: ScalarSlot = UNSET
    phone: ScalarSlot = UNSET
    email: ScalarSlot = UNSET
    address: ScalarSlot = UNSET
    tags: TagSlot = UNSET
    module_role_operation: Optional[ModuleRoleOperation] = None
    description: ScalarSlot = UNSET

    def __post_init__(self):
        for name in SCALAR_FIELDS:
            if getattr(self, name) is CLEAR:
                raise ValueError(f"Field '{name}' cannot be cleared")
        if not isinstance(self.tags, Slot):
            tags = frozenset(self.tags)
            object.__setattr__(self, 'tags', tags if tags else CLEAR)

    def is_any_field_edited(self) -> bool:
        """Return True if at least one slot, including the role operation, is set."""
        return (
            any(value is not UNSET for value in (
                self.name, self.phone, self.email, self.address,
                self.tags, self.description
            ))
            or self.module_role_operation is not None
        )

    @classmethod
    def builder(cls) -> 'EditPersonDescriptorBuilder':
        return EditPersonDescriptorBuilder()


class EditPersonDescriptorBuilder:
    """Collects overrides one slot at a time and builds a descriptor.

    Example:
        descriptor = (EditPersonDescriptor.builder()
                      .set_phone('91234567')
                      .set_tags(['friends'])
                      .build())
    """

    def __init__(self, base: Optional[EditPersonDescriptor] = None):
        base = base or EditPersonDescriptor()
        self._name = base.name
        self._phone = base.phone
        self._email = base.email
        self._address = base.address
        self._tags = base.tags
        self._module_role_operation = base.module_role_operation
        self._description = base.description

    def set_name(self, name: str) -> 'EditPersonDescriptorBuilder':
        self._name = name
        return self

    def set_phone(self, phone: str) -> 'EditPersonDescriptorBuilder':
        self._phone = phone
        return self

    def set_email(self, email: str) -> 'EditPersonDescriptorBuilder':
        self._email = email
        return self

    def set_address(self, address: str) -> 'EditPersonDescriptorBuilder':
        self._address = address
        return self

    def set_tags(self, tags: Iterable[str]) -> 'EditPersonDescriptorBuilder':
        """Replace the tag set.

        The tags are copied, so later changes to the caller's collection
        have no effect. An empty collection clears the tags.
        """
        copied = frozenset(tags)
        self._tags = copied if copied else CLEAR
        return self

    def clear_tags(self) -> 'EditPersonDescriptorBuilder':
        self._tags = CLEAR
        return self

    def set_module_role_operation(
        self,
        operation: ModuleRoleOperation
    ) -> 'EditPersonDescriptorBuilder':
        self._module_role_operation = operation
        return self

    def set_description(self, description: str) -> 'EditPersonDescriptorBuilder':
        self._description = description
        return self

    def build(self) -> EditPersonDescriptor:
        return EditPersonDescriptor(
            name=self._name,
            phone=self._phone,
            email=self._email,
            address=self._address,
            tags=self._tags,
            module_role_operation=self._module_role_operation,
            description=self._description,
        )
