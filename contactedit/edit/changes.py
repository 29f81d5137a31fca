"""
Human-readable summary of what an edit changed.

Changes are first collected as FieldChange tuples in a fixed field order,
then rendered in a single formatting pass.
"""

from typing import Any, Callable, Dict, List, NamedTuple

from ..core.person import Person
from .role_operation import describe_module_role_changes


NO_CHANGES = "No changes made."
CHANGES_HEADER = "Change(s) made: \n"


class FieldChange(NamedTuple):
    """A single field whose value differs between two records."""
    field: str
    label: str
    before: Any
    after: Any


# (attribute, label), in the order changes are reported
FIELD_ORDER = [
    ('name', 'Name'),
    ('phone', 'Phone'),
    ('email', 'Email'),
    ('address', 'Address'),
    ('tags', 'Tags'),
    ('module_roles', 'Module roles'),
    ('description', 'Description'),
]


def _optional(sentinel: str) -> Callable[[Any], str]:
    return lambda value: sentinel if value is None else str(value)


def _tags(tags) -> str:
    return '[' + ', '.join(f"[{tag}]" for tag in sorted(tags)) + ']'


RENDERERS: Dict[str, Callable[[Any], str]] = {
    'name': str,
    'phone': _optional('<no phone>'),
    'email': _optional('<no email>'),
    'address': _optional('<no address>'),
    'tags': _tags,
    'description': _optional('<no description>'),
}


def collect_changes(before: Person, after: Person) -> List[FieldChange]:
    """
    List every field that differs between two records.

    Args:
        before: Record before the edit
        after: Record after the edit

    Returns:
        FieldChange tuples in reporting order; empty if nothing differs
    """
    changes = []
    for attribute, label in FIELD_ORDER:
        old = getattr(before, attribute)
        new = getattr(after, attribute)
        if old != new:
            changes.append(FieldChange(attribute, label, old, new))
    return changes


def render_change(change: FieldChange) -> str:
    if change.field == 'module_roles':
        return describe_module_role_changes(change.before, change.after)

    render = RENDERERS[change.field]
    return f"{change.label}: {render(change.before)} -> {render(change.after)}"


def render_changes(changes: List[FieldChange]) -> str:
    if not changes:
        return NO_CHANGES
    return CHANGES_HEADER + ''.join(render_change(c) + '\n' for c in changes)


def describe_changes(before: Person, after: Person) -> str:
    """Describe the changes made to a person, one line per changed field."""
    return render_changes(collect_changes(before, after))
