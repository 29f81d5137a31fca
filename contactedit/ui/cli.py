"""Command-line interface for ContactEdit."""

import argparse
import logging
import sys
from typing import Optional

from ..core.person import format_person
from ..edit.command import EditCommand
from ..edit.descriptor import EditPersonDescriptor
from ..edit.exceptions import CommandError, ParseError
from ..edit.role_operation import parse_module_role_operation
from ..model.address_book import AddressBook
from ..storage.json_storage import DataLoadingError, load_address_book, save_address_book
from ..utils.config import EditConfig, default_config


logger = logging.getLogger(__name__)


def print_persons(address_book: AddressBook) -> None:
    """Print the displayed person list with one-based indices.

    Args:
        address_book: Address book to list
    """
    persons = address_book.get_filtered_person_list()
    if not persons:
        print("No persons in address book.")
        return

    for i, person in enumerate(persons, start=1):
        print(f"{i}. {format_person(person)}")


def build_descriptor(args: argparse.Namespace) -> EditPersonDescriptor:
    """Build an edit descriptor from the parsed edit arguments.

    Raises:
        ParseError: If the name is blank or the module-role operation is malformed
    """
    builder = EditPersonDescriptor.builder()

    if args.name is not None:
        if not args.name.strip():
            raise ParseError("Names should not be blank")
        builder.set_name(args.name)
    if args.phone is not None:
        builder.set_phone(args.phone)
    if args.email is not None:
        builder.set_email(args.email)
    if args.address is not None:
        builder.set_address(args.address)
    if args.clear_tags:
        builder.clear_tags()
    elif args.tags is not None:
        builder.set_tags(args.tags)
    if args.modules is not None:
        builder.set_module_role_operation(parse_module_role_operation(args.modules))
    if args.description is not None:
        builder.set_description(args.description)

    return builder.build()


def list_command(args: argparse.Namespace, config: EditConfig) -> int:
    """Execute the list command.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        address_book = load_address_book(config.data_file)
    except DataLoadingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_persons(address_book)
    return 0


def edit_command(args: argparse.Namespace, config: EditConfig) -> int:
    """Execute the edit command.

    The data file is rewritten only when the edit succeeds.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        address_book = load_address_book(config.data_file)
        command = EditCommand(args.index, build_descriptor(args))
        result = command.execute(address_book)
        save_address_book(address_book, config.data_file)
    except (CommandError, DataLoadingError) as e:
        print(str(e), file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: could not save address book: {e}", file=sys.stderr)
        if args.verbose:
            logger.exception("Save failed")
        return 1

    print(result.feedback)
    return 0


def positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"index must be a positive integer: {text}")
    return value


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='contactedit',
        description='Edit people in a module-aware address book.',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s 0.1.0'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    parser.add_argument(
        '--data',
        help=f'Path to the address book JSON file (default: {default_config.data_file})'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands'
    )

    subparsers.add_parser(
        'list',
        help='List everyone in the address book'
    )

    edit_parser = subparsers.add_parser(
        'edit',
        help='Edit the person at INDEX in the list',
        description=(
            'Existing values are overwritten by the input values, except for module roles.\n'
            "When adding module roles, 'Student' is the default role type if you do not specify.\n"
            'When deleting module roles, every role in the module is deleted if you do not specify.'
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    edit_parser.add_argument(
        'index',
        type=positive_int,
        help='Index of the person in the displayed list (starts at 1)'
    )
    edit_parser.add_argument('-n', '--name', help='New name')
    edit_parser.add_argument('-p', '--phone', help='New phone number')
    edit_parser.add_argument('-e', '--email', help='New email address')
    edit_parser.add_argument('-a', '--address', help='New address')
    edit_parser.add_argument(
        '-t', '--tag',
        dest='tags',
        action='append',
        help='Tag to set; repeat for several tags. Replaces all existing tags'
    )
    edit_parser.add_argument(
        '--clear-tags',
        action='store_true',
        help='Remove all tags'
    )
    edit_parser.add_argument(
        '-m', '--modules',
        help=("Module role operation, e.g. '+CS1101S MA1521-TA'. "
              "Write deletions as --modules=-CS1101S-tutor")
    )
    edit_parser.add_argument('-d', '--description', help='New description')

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    config = EditConfig(
        data_file=args.data or default_config.data_file,
        log_level=logging.DEBUG if args.verbose else default_config.log_level,
    )
    logging.basicConfig(level=config.log_level, format=config.log_format)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == 'list':
        return list_command(args, config)
    elif args.command == 'edit':
        return edit_command(args, config)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
