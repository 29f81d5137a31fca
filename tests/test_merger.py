"""Tests for building the edited person from a descriptor."""

import pytest

from contactedit.core.module_role import ModuleCode, ModuleRoleMap, RoleType, make_pair
from contactedit.core.person import Person
from contactedit.edit.descriptor import EditPersonDescriptor
from contactedit.edit.exceptions import InvalidRoleEditError
from contactedit.edit.merger import create_edited_person
from contactedit.edit.role_operation import (
    AddModuleRoles,
    DeleteModuleRoles,
    ModuleRoleTarget,
)


@pytest.fixture
def alice():
    """A fully populated person."""
    return Person(
        name='Alice Pauline',
        phone='94351253',
        email='alice@example.com',
        address='123, Jurong West Ave 6, #08-111',
        tags={'friends'},
        module_roles=ModuleRoleMap.of(make_pair('CS1101S')),
        description='Likes algorithms',
    )


def test_empty_descriptor_keeps_every_field(alice):
    """Test that merging nothing yields an equal record."""
    edited = create_edited_person(alice, EditPersonDescriptor())

    assert edited == alice


def test_overrides_replace_fields(alice):
    """Test each set slot replaces the original value."""
    descriptor = (EditPersonDescriptor.builder()
                  .set_name('Bob Choo')
                  .set_phone('22222222')
                  .set_email('bob@example.com')
                  .set_address('Block 123, Bobby Street 3')
                  .set_tags(['husband'])
                  .set_description('Owes money')
                  .build())

    edited = create_edited_person(alice, descriptor)

    assert edited.name == 'Bob Choo'
    assert edited.phone == '22222222'
    assert edited.email == 'bob@example.com'
    assert edited.address == 'Block 123, Bobby Street 3'
    assert edited.tags == frozenset({'husband'})
    assert edited.description == 'Owes money'
    assert edited.module_roles == alice.module_roles


def test_unset_slots_keep_absent_fields_absent():
    """Test that an unset slot never fills in or clears a field."""
    person = Person(name='Carl Kurz', phone='95352563')
    descriptor = EditPersonDescriptor.builder().set_name('Carl K').build()

    edited = create_edited_person(person, descriptor)

    assert edited.phone == '95352563'
    assert edited.email is None
    assert edited.address is None
    assert edited.description is None


def test_optional_field_can_be_added():
    """Test setting a field the original did not have."""
    person = Person(name='Carl Kurz')
    descriptor = EditPersonDescriptor.builder().set_email('carl@example.com').build()

    assert create_edited_person(person, descriptor).email == 'carl@example.com'


def test_directly_built_descriptor_merges_like_builder(alice):
    """Test a constructor-built descriptor copies and clears tags on merge."""
    tags = {'colleagues'}
    replace = EditPersonDescriptor(phone='87438807', tags=tags)
    tags.add('owesMoney')

    edited = create_edited_person(alice, replace)
    cleared = create_edited_person(alice, EditPersonDescriptor(tags=frozenset()))

    assert edited.phone == '87438807'
    assert edited.tags == frozenset({'colleagues'})
    assert cleared.tags == frozenset()
    assert cleared.phone == alice.phone


def test_explicit_empty_tags_clear_tags(alice):
    """Test that an explicit empty tag set replaces the original tags."""
    descriptor = EditPersonDescriptor.builder().set_tags(set()).build()

    edited = create_edited_person(alice, descriptor)

    assert edited.tags == frozenset()


def test_tags_replaced_not_merged(alice):
    """Test new tags replace the old set instead of adding to it."""
    descriptor = EditPersonDescriptor.builder().set_tags(['colleagues']).build()

    assert create_edited_person(alice, descriptor).tags == frozenset({'colleagues'})


def test_module_role_operation_applied(alice):
    """Test the role operation runs against the original map."""
    operation = AddModuleRoles({ModuleRoleTarget(ModuleCode('MA1521'), RoleType.TUTOR)})
    descriptor = EditPersonDescriptor.builder().set_module_role_operation(operation).build()

    edited = create_edited_person(alice, descriptor)

    assert edited.module_roles == ModuleRoleMap.of(
        make_pair('CS1101S'),
        make_pair('MA1521', RoleType.TUTOR),
    )


def test_invalid_role_edit_wrapped(alice):
    """Test role edit failures carry the invalid values prefix."""
    operation = DeleteModuleRoles({ModuleRoleTarget(ModuleCode('CS1101S'), RoleType.TUTOR)})
    descriptor = EditPersonDescriptor.builder().set_module_role_operation(operation).build()

    with pytest.raises(InvalidRoleEditError) as exc_info:
        create_edited_person(alice, descriptor)

    assert str(exc_info.value) == (
        "Edit failed due to invalid values provided: \n"
        "The person does not have the module role: CS1101S-Tutor"
    )


def test_original_not_mutated(alice):
    """Test the original record is left as it was."""
    snapshot = Person(
        name=alice.name,
        phone=alice.phone,
        email=alice.email,
        address=alice.address,
        tags=alice.tags,
        module_roles=alice.module_roles,
        description=alice.description,
    )
    descriptor = (EditPersonDescriptor.builder()
                  .set_phone('11111111')
                  .clear_tags()
                  .set_module_role_operation(
                      DeleteModuleRoles({ModuleRoleTarget(ModuleCode('CS1101S'))}))
                  .build())

    edited = create_edited_person(alice, descriptor)

    assert alice == snapshot
    assert edited is not alice
    assert edited.module_roles == ModuleRoleMap()
