"""Core contact record types."""

from .module_role import (
    DEFAULT_ROLE_TYPE,
    ModuleCode,
    ModuleRoleMap,
    ModuleRolePair,
    RoleType,
    make_pair,
)
from .person import Person, format_person

__all__ = [
    'DEFAULT_ROLE_TYPE',
    'ModuleCode',
    'ModuleRoleMap',
    'ModuleRolePair',
    'RoleType',
    'make_pair',
    'Person',
    'format_person',
]
