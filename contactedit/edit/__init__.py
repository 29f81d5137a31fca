"""
Editing of existing people.

Turns a sparse set of field overrides plus a module-role operation into a
validated replacement record, and describes what changed.
"""

from .changes import FieldChange, collect_changes, describe_changes, render_changes
from .command import CommandResult, EditCommand
from .descriptor import CLEAR, UNSET, EditPersonDescriptor, EditPersonDescriptorBuilder
from .exceptions import (
    CommandError,
    DuplicateEmailError,
    DuplicatePhoneAndEmailError,
    DuplicatePhoneError,
    EmptyEditError,
    InvalidRoleEditError,
    ParseError,
    PersonIndexOutOfRangeError,
)
from .merger import create_edited_person
from .role_operation import (
    AddModuleRoles,
    DeleteModuleRoles,
    ModuleRoleOperation,
    ModuleRoleTarget,
    apply_module_role_operation,
    describe_module_role_changes,
    parse_module_role_operation,
)
from .uniqueness import Model, check_uniqueness

__all__ = [
    'FieldChange',
    'collect_changes',
    'describe_changes',
    'render_changes',
    'CommandResult',
    'EditCommand',
    'CLEAR',
    'UNSET',
    'EditPersonDescriptor',
    'EditPersonDescriptorBuilder',
    'CommandError',
    'DuplicateEmailError',
    'DuplicatePhoneAndEmailError',
    'DuplicatePhoneError',
    'EmptyEditError',
    'InvalidRoleEditError',
    'ParseError',
    'PersonIndexOutOfRangeError',
    'create_edited_person',
    'AddModuleRoles',
    'DeleteModuleRoles',
    'ModuleRoleOperation',
    'ModuleRoleTarget',
    'apply_module_role_operation',
    'describe_module_role_changes',
    'parse_module_role_operation',
    'Model',
    'check_uniqueness',
]
