"""
Module-role edit operations.

An edit either adds module roles to a person or deletes them. The two
variants form a closed set and are applied by matching on their type.
"""

import re
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Union, assert_never

from ..core.module_role import (
    DEFAULT_ROLE_TYPE,
    MODULE_CODE_REGEX,
    ModuleCode,
    ModuleRoleMap,
    ModuleRolePair,
    RoleType,
)
from .exceptions import InvalidRoleEditError, ParseError


ROLE_SUFFIX_REGEX = r'(?:-student|-tutor|-ta|-professor|-prof)?'
MODULE_ROLE_OPERATION_REGEX = (
    r' *[+-] *' + MODULE_CODE_REGEX + ROLE_SUFFIX_REGEX
    + r'(?: +' + MODULE_CODE_REGEX + ROLE_SUFFIX_REGEX + r')* *'
)

MESSAGE_VALID_OPERATION_CONSTRAINT = (
    "Module role operation follows this format:\n"
    "+(MODULECODE[-ROLETYPE])+ for adding new module role(s)\n"
    "or -(MODULECODE[-ROLETYPE])+ for deleting existing module role(s)\n"
    "e.g. +CS1101S MA1521-TA\n"
    "adds CS1101S-Student and MA1521-Tutor to the person\n"
)

MODULE_ROLE_ADDED = "Module role(s) added: "
MODULE_ROLE_DELETED = "Module role(s) deleted: "


@dataclass(frozen=True, slots=True)
class ModuleRoleTarget:
    """A module code with an optional role, as written in an edit."""

    module_code: ModuleCode
    role_type: Optional[RoleType] = None

    def __str__(self) -> str:
        if self.role_type is None:
            return str(self.module_code)
        return f"{self.module_code}-{self.role_type}"

    def resolve(self) -> ModuleRolePair:
        """Turn the target into a concrete pair using the default role."""
        return ModuleRolePair(self.module_code, self.role_type or DEFAULT_ROLE_TYPE)


@dataclass(frozen=True, slots=True)
class AddModuleRoles:
    """Add module roles; a target without a role gets the default role."""

    targets: FrozenSet[ModuleRoleTarget] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, 'targets', frozenset(self.targets))


@dataclass(frozen=True, slots=True)
class DeleteModuleRoles:
    """Delete module roles; a target without a role removes the whole module."""

    targets: FrozenSet[ModuleRoleTarget] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, 'targets', frozenset(self.targets))


ModuleRoleOperation = Union[AddModuleRoles, DeleteModuleRoles]


def apply_module_role_operation(
    operation: ModuleRoleOperation,
    module_roles: ModuleRoleMap
) -> ModuleRoleMap:
    """
    Apply an add or delete operation to a module-role map.

    Args:
        operation: Operation to apply
        module_roles: Map held by the person before the edit

    Returns:
        New map; the input map is never modified

    Raises:
        InvalidRoleEditError: If a delete target is not held by the person.
            Nothing is removed when any target fails.
    """
    match operation:
        case AddModuleRoles(targets=targets):
            return module_roles.union(target.resolve() for target in targets)
        case DeleteModuleRoles(targets=targets):
            return _delete_module_roles(targets, module_roles)
        case _:
            assert_never(operation)


def _delete_module_roles(
    targets: FrozenSet[ModuleRoleTarget],
    module_roles: ModuleRoleMap
) -> ModuleRoleMap:
    to_remove = set()
    missing = []

    for target in sorted(targets, key=_target_sort_key):
        if target.role_type is not None:
            pair = ModuleRolePair(target.module_code, target.role_type)
            if module_roles.contains(pair):
                to_remove.add(pair)
            else:
                missing.append(f"The person does not have the module role: {pair}")
        else:
            held = module_roles.pairs_for(target.module_code)
            if held:
                to_remove.update(held)
            else:
                missing.append(
                    f"The person does not have any role in module: {target.module_code}"
                )

    if missing:
        raise InvalidRoleEditError('\n'.join(missing))

    return module_roles.difference(to_remove)


def _target_sort_key(target: ModuleRoleTarget):
    return (target.module_code.value, target.role_type.value if target.role_type else '')


def describe_module_role_changes(before: ModuleRoleMap, after: ModuleRoleMap) -> str:
    """
    Describe the module roles gained and lost between two maps.

    Example:
        Module role(s) added: MA1521-Tutor
        Module role(s) deleted: CS1101S-Student CS2030S-Student

    Args:
        before: Map before the edit
        after: Map after the edit

    Returns:
        Up to two lines joined by a newline; empty when nothing changed
    """
    added = after.difference(before.pairs)
    deleted = before.difference(after.pairs)

    lines = []
    if added:
        lines.append(MODULE_ROLE_ADDED + ' '.join(str(p) for p in added.sorted_pairs()))
    if deleted:
        lines.append(MODULE_ROLE_DELETED + ' '.join(str(p) for p in deleted.sorted_pairs()))

    return '\n'.join(lines)


def is_valid_module_role_operation(text: str) -> bool:
    return re.fullmatch(MODULE_ROLE_OPERATION_REGEX, text.lower()) is not None


def parse_module_role_operation(text: str) -> ModuleRoleOperation:
    """
    Parse the command form of a module-role edit.

    Accepts a leading '+' (add) or '-' (delete) followed by one or more
    MODULECODE[-ROLETYPE] tokens, e.g. "+CS1101S MA1521-TA".

    Args:
        text: Raw operation text

    Returns:
        AddModuleRoles or DeleteModuleRoles

    Raises:
        ParseError: If the text is not a valid operation
    """
    if not is_valid_module_role_operation(text):
        raise ParseError(MESSAGE_VALID_OPERATION_CONSTRAINT)

    stripped = text.strip()
    sign, body = stripped[0], stripped[1:]

    targets: List[ModuleRoleTarget] = []
    for token in body.split():
        code, _, role = token.partition('-')
        role_type = RoleType.from_string(role) if role else None
        targets.append(ModuleRoleTarget(ModuleCode(code), role_type))

    if sign == '+':
        return AddModuleRoles(frozenset(targets))
    return DeleteModuleRoles(frozenset(targets))
