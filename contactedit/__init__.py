"""ContactEdit - Edit people and their module roles in an address book."""

__version__ = "0.1.0"

from .core.person import Person
from .core.module_role import ModuleCode, ModuleRoleMap, ModuleRolePair, RoleType
from .edit.command import EditCommand, CommandResult
from .edit.descriptor import EditPersonDescriptor
from .model.address_book import AddressBook

__all__ = [
    'Person',
    'ModuleCode',
    'ModuleRoleMap',
    'ModuleRolePair',
    'RoleType',
    'EditCommand',
    'CommandResult',
    'EditPersonDescriptor',
    'AddressBook',
]
