"""JSON file storage for the address book."""

import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from ..core.module_role import ModuleCode, ModuleRoleMap, ModuleRolePair, RoleType
from ..core.person import Person
from ..model.address_book import AddressBook


logger = logging.getLogger(__name__)


class DataLoadingError(Exception):
    """Address book file is unreadable or does not match the schema."""


# Pydantic models for the file format
class JsonModuleRole(BaseModel):
    module_code: str
    role_type: RoleType = RoleType.STUDENT


class JsonPerson(BaseModel):
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    module_roles: List[JsonModuleRole] = Field(default_factory=list)
    description: Optional[str] = None

    @classmethod
    def from_person(cls, person: Person) -> 'JsonPerson':
        return cls(
            name=person.name,
            phone=person.phone,
            email=person.email,
            address=person.address,
            tags=sorted(person.tags),
            module_roles=[
                JsonModuleRole(module_code=str(p.module_code), role_type=p.role_type)
                for p in person.module_roles.sorted_pairs()
            ],
            description=person.description,
        )

    def to_person(self) -> Person:
        pairs = frozenset(
            ModuleRolePair(ModuleCode(role.module_code), role.role_type)
            for role in self.module_roles
        )
        return Person(
            name=self.name,
            phone=self.phone,
            email=self.email,
            address=self.address,
            tags=frozenset(self.tags),
            module_roles=ModuleRoleMap(pairs),
            description=self.description,
        )


class JsonAddressBook(BaseModel):
    persons: List[JsonPerson] = Field(default_factory=list)


def load_address_book(path: str | Path) -> AddressBook:
    """
    Load an address book from a JSON file.

    Args:
        path: File to read

    Returns:
        AddressBook with the stored people in file order

    Raises:
        DataLoadingError: If the file cannot be read or is invalid
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding='utf-8')
    except OSError as e:
        raise DataLoadingError(f"Could not read address book {path}: {e}") from e

    try:
        data = JsonAddressBook.model_validate_json(raw)
        persons = [p.to_person() for p in data.persons]
    except (ValidationError, ValueError) as e:
        raise DataLoadingError(f"Invalid address book file {path}: {e}") from e

    logger.info(f"Loaded {len(persons)} persons from {path}")
    return AddressBook(persons)


def save_address_book(address_book: AddressBook, path: str | Path) -> None:
    """Write an address book to a JSON file, creating parent directories."""
    path = Path(path)
    data = JsonAddressBook(persons=[JsonPerson.from_person(p) for p in address_book.persons])

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data.model_dump_json(indent=2), encoding='utf-8')
    logger.info(f"Saved {len(address_book)} persons to {path}")
