"""Module codes, role types and the module-role multimap of a person."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Iterator, List, Optional


MODULE_CODE_REGEX = r'[A-Za-z]{2,4}\d{4}[A-Za-z]{0,2}'


class RoleType(Enum):
    """Role a person holds in a module."""
    STUDENT = "Student"
    TUTOR = "Tutor"
    PROFESSOR = "Professor"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, text: str) -> 'RoleType':
        """Resolve a role name or one of its aliases, ignoring case.

        Args:
            text: Role name such as 'tutor', 'TA' or 'prof'

        Returns:
            Matching RoleType

        Raises:
            ValueError: If the text names no known role
        """
        key = text.strip().lower()
        if key not in _ROLE_ALIASES:
            raise ValueError(f"Unknown role type: {text!r}")
        return _ROLE_ALIASES[key]


_ROLE_ALIASES = {
    'student': RoleType.STUDENT,
    'tutor': RoleType.TUTOR,
    'ta': RoleType.TUTOR,
    'professor': RoleType.PROFESSOR,
    'prof': RoleType.PROFESSOR,
}

DEFAULT_ROLE_TYPE = RoleType.STUDENT


@dataclass(frozen=True, slots=True, order=True)
class ModuleCode:
    """A module code such as CS1101S, always stored upper-case."""

    value: str

    def __post_init__(self):
        normalized = self.value.strip().upper()
        if not self.is_valid(normalized):
            raise ValueError(f"Invalid module code: {self.value!r}")
        object.__setattr__(self, 'value', normalized)

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def is_valid(text: str) -> bool:
        return re.fullmatch(MODULE_CODE_REGEX, text.strip()) is not None


@dataclass(frozen=True, slots=True)
class ModuleRolePair:
    """A (module code, role type) assignment."""

    module_code: ModuleCode
    role_type: RoleType

    def __str__(self) -> str:
        return f"{self.module_code}-{self.role_type}"

    def sort_key(self):
        return (self.module_code.value, self.role_type.value)


@dataclass(frozen=True, slots=True)
class ModuleRoleMap:
    """Immutable set of module-role pairs held by one person.

    A module code may appear with several distinct role types. Membership
    is exact: both the code and the role must match.
    """

    pairs: FrozenSet[ModuleRolePair] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, 'pairs', frozenset(self.pairs))

    @classmethod
    def of(cls, *pairs: ModuleRolePair) -> 'ModuleRoleMap':
        return cls(frozenset(pairs))

    def __iter__(self) -> Iterator[ModuleRolePair]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __contains__(self, pair: object) -> bool:
        return pair in self.pairs

    def __str__(self) -> str:
        return ' '.join(str(pair) for pair in self.sorted_pairs())

    def contains(self, pair: ModuleRolePair) -> bool:
        return pair in self.pairs

    def pairs_for(self, module_code: ModuleCode) -> FrozenSet[ModuleRolePair]:
        """Get every pair held for a module code, whatever the role.

        Args:
            module_code: Module to look up

        Returns:
            Possibly empty set of matching pairs
        """
        return frozenset(p for p in self.pairs if p.module_code == module_code)

    def union(self, pairs: Iterable[ModuleRolePair]) -> 'ModuleRoleMap':
        return ModuleRoleMap(self.pairs | frozenset(pairs))

    def difference(self, pairs: Iterable[ModuleRolePair]) -> 'ModuleRoleMap':
        return ModuleRoleMap(self.pairs - frozenset(pairs))

    def sorted_pairs(self) -> List[ModuleRolePair]:
        """Get pairs ordered by module code, then role."""
        return sorted(self.pairs, key=ModuleRolePair.sort_key)


def make_pair(module_code: str, role_type: Optional[RoleType] = None) -> ModuleRolePair:
    """Build a pair from a raw code, falling back to the default role."""
    return ModuleRolePair(ModuleCode(module_code), role_type or DEFAULT_ROLE_TYPE)
