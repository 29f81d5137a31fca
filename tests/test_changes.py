"""Tests for the change summary of an edit."""

import pytest

from contactedit.core.module_role import ModuleRoleMap, RoleType, make_pair
from contactedit.core.person import Person
from contactedit.edit.changes import (
    FieldChange,
    collect_changes,
    describe_changes,
    render_changes,
)


@pytest.fixture
def alice():
    return Person(
        name='Alice Pauline',
        phone='94351253',
        email='alice@example.com',
        tags={'friends'},
        module_roles=ModuleRoleMap.of(make_pair('CS1101S')),
    )


def test_no_changes(alice):
    """Test identical records give the fixed no-change message."""
    assert describe_changes(alice, alice) == "No changes made."
    assert collect_changes(alice, alice) == []


def test_single_change(alice):
    """Test one changed field gives a header and one line."""
    after = Person(
        name=alice.name,
        phone='22222222',
        email=alice.email,
        tags=alice.tags,
        module_roles=alice.module_roles,
    )

    assert describe_changes(alice, after) == (
        "Change(s) made: \n"
        "Phone: 94351253 -> 22222222\n"
    )


def test_absent_fields_use_sentinels(alice):
    """Test absent optional fields render as placeholders."""
    after = Person(
        name=alice.name,
        tags=alice.tags,
        module_roles=alice.module_roles,
        address='Block 123, Bobby Street 3',
        description='Owes money',
    )

    assert describe_changes(alice, after) == (
        "Change(s) made: \n"
        "Phone: 94351253 -> <no phone>\n"
        "Email: alice@example.com -> <no email>\n"
        "Address: <no address> -> Block 123, Bobby Street 3\n"
        "Description: <no description> -> Owes money\n"
    )


def test_all_fields_in_fixed_order(alice):
    """Test every changed field is reported in the documented order."""
    after = Person(
        name='Bob Choo',
        phone='22222222',
        email='bob@example.com',
        address='Block 123, Bobby Street 3',
        tags={'colleagues', 'friends'},
        module_roles=ModuleRoleMap.of(make_pair('MA1521', RoleType.TUTOR)),
        description='Owes money',
    )

    assert describe_changes(alice, after) == (
        "Change(s) made: \n"
        "Name: Alice Pauline -> Bob Choo\n"
        "Phone: 94351253 -> 22222222\n"
        "Email: alice@example.com -> bob@example.com\n"
        "Address: <no address> -> Block 123, Bobby Street 3\n"
        "Tags: [[friends]] -> [[colleagues], [friends]]\n"
        "Module role(s) added: MA1521-Tutor\n"
        "Module role(s) deleted: CS1101S-Student\n"
        "Description: <no description> -> Owes money\n"
    )


def test_cleared_tags(alice):
    """Test an emptied tag set renders as empty brackets."""
    after = Person(
        name=alice.name,
        phone=alice.phone,
        email=alice.email,
        module_roles=alice.module_roles,
    )

    assert describe_changes(alice, after) == "Change(s) made: \nTags: [[friends]] -> []\n"


def test_collect_changes_tuples(alice):
    """Test the collected tuples before rendering."""
    after = Person(name='Bob Choo', phone=alice.phone, email=alice.email,
                   tags=alice.tags, module_roles=alice.module_roles)

    changes = collect_changes(alice, after)

    assert changes == [FieldChange('name', 'Name', 'Alice Pauline', 'Bob Choo')]
    assert render_changes(changes) == "Change(s) made: \nName: Alice Pauline -> Bob Choo\n"
    assert render_changes([]) == "No changes made."
