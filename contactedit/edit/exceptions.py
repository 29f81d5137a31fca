"""Errors raised while editing a person."""

from typing import Optional


class CommandError(Exception):
    """Base class for failures surfaced verbatim to the user."""

    message = "Command failed."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message if message is not None else self.message)


class PersonIndexOutOfRangeError(CommandError):
    """Index does not point into the displayed person list."""

    message = "The person index provided is invalid: {index}"

    def __init__(self, index: int):
        self.index = index
        super().__init__(self.message.format(index=index))


class EmptyEditError(CommandError):
    message = "At least one field to edit must be provided."


class DuplicatePhoneAndEmailError(CommandError):
    message = "This email and this phone number already exist in the address book."


class DuplicatePhoneError(CommandError):
    message = "This phone number already exists in the address book"


class DuplicateEmailError(CommandError):
    message = "This email already exists in the address book."


class InvalidRoleEditError(CommandError):
    """A module-role deletion targets a role the person does not hold."""

    message = "Invalid module role edit."


class ParseError(CommandError):
    """Command text could not be turned into typed values."""
