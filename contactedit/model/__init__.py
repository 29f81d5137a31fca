"""Address book store."""

from .address_book import AddressBook

__all__ = ['AddressBook']
