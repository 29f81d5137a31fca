"""
Builds the edited version of a person from an edit descriptor.

Overrides replace the matching field; unset slots keep the original value
exactly, whether it was present or absent.
"""

from typing import FrozenSet, Optional

from ..core.module_role import ModuleRoleMap
from ..core.person import Person
from .descriptor import CLEAR, UNSET, EditPersonDescriptor, ScalarSlot, TagSlot
from .exceptions import InvalidRoleEditError
from .role_operation import apply_module_role_operation


MESSAGE_INVALID_VALUES = "Edit failed due to invalid values provided: {}"


def create_edited_person(person: Person, descriptor: EditPersonDescriptor) -> Person:
    """
    Create a new person with the descriptor's overrides applied.

    Args:
        person: Person being edited; left untouched
        descriptor: Overrides to apply

    Returns:
        New Person instance

    Raises:
        InvalidRoleEditError: If the module-role operation cannot be applied
    """
    return Person(
        name=_override(descriptor.name, person.name),
        phone=_override(descriptor.phone, person.phone),
        email=_override(descriptor.email, person.email),
        address=_override(descriptor.address, person.address),
        tags=_resolve_tags(descriptor.tags, person.tags),
        module_roles=_resolve_module_roles(descriptor, person.module_roles),
        description=_override(descriptor.description, person.description),
    )


def _override(slot: ScalarSlot, original: Optional[str]) -> Optional[str]:
    return original if slot is UNSET else slot


def _resolve_tags(
    slot: TagSlot,
    original: FrozenSet[str]
) -> FrozenSet[str]:
    if slot is UNSET:
        return original
    if slot is CLEAR:
        return frozenset()
    return slot


def _resolve_module_roles(
    descriptor: EditPersonDescriptor,
    original: ModuleRoleMap
) -> ModuleRoleMap:
    operation = descriptor.module_role_operation
    if operation is None:
        return original

    try:
        return apply_module_role_operation(operation, original)
    except InvalidRoleEditError as e:
        raise InvalidRoleEditError(MESSAGE_INVALID_VALUES.format('\n' + str(e))) from e
