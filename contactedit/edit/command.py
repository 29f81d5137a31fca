"""Edit command: replaces a person in the address book with an edited copy."""

import logging
from dataclasses import dataclass

from ..core.person import format_person
from .changes import describe_changes
from .descriptor import EditPersonDescriptor
from .exceptions import EmptyEditError, PersonIndexOutOfRangeError
from .merger import create_edited_person
from .uniqueness import Model, check_uniqueness


logger = logging.getLogger(__name__)

MESSAGE_EDIT_PERSON_SUCCESS = "{}\nEdited Person: {}"


def show_all_persons(person) -> bool:
    return True


@dataclass(frozen=True)
class CommandResult:
    """Feedback shown to the user after a command runs."""
    feedback: str

    def __str__(self) -> str:
        return self.feedback


class EditCommand:
    """
    Edits the details of a person identified by their position in the
    displayed person list.

    Edit Process:
    1. Look up the person at the one-based index
    2. Build the edited person from the descriptor
    3. Check phone and email uniqueness
    4. Replace the person in the store
    5. Report what changed
    """

    COMMAND_WORD = "edit"

    def __init__(self, index: int, descriptor: EditPersonDescriptor):
        """
        Initialize the command.

        Args:
            index: One-based index into the displayed person list
            descriptor: Overrides to apply

        Raises:
            ValueError: If index is not positive
            EmptyEditError: If the descriptor edits no field
        """
        if index < 1:
            raise ValueError(f"Index must be a positive integer, got {index}")
        if not descriptor.is_any_field_edited():
            raise EmptyEditError()

        self.index = index
        self.descriptor = descriptor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditCommand):
            return NotImplemented
        return self.index == other.index and self.descriptor == other.descriptor

    def __repr__(self) -> str:
        return f"EditCommand(index={self.index!r}, descriptor={self.descriptor!r})"

    def execute(self, model: Model) -> CommandResult:
        """
        Run the edit against a store.

        The store is only modified once every check has passed.

        Args:
            model: Store holding the displayed person list

        Returns:
            CommandResult describing the changes and the edited person

        Raises:
            PersonIndexOutOfRangeError: If the index is past the end of the list
            InvalidRoleEditError: If the module-role operation is invalid
            DuplicatePhoneAndEmailError, DuplicatePhoneError, DuplicateEmailError:
                If the edited contact details belong to another person
        """
        last_shown_list = model.get_filtered_person_list()

        if self.index > len(last_shown_list):
            raise PersonIndexOutOfRangeError(self.index)

        person_to_edit = last_shown_list[self.index - 1]
        edited_person = create_edited_person(person_to_edit, self.descriptor)

        check_uniqueness(model, person_to_edit, edited_person)

        model.set_person(person_to_edit, edited_person)
        model.update_filtered_person_list(show_all_persons)
        logger.info(f"Edited person at index {self.index}: {edited_person.name}")

        changes_description = describe_changes(person_to_edit, edited_person)
        logger.debug(changes_description)

        return CommandResult(
            MESSAGE_EDIT_PERSON_SUCCESS.format(changes_description, format_person(edited_person))
        )
