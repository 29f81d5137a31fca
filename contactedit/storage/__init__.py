"""Persistence of the address book."""

from .json_storage import DataLoadingError, load_address_book, save_address_book

__all__ = ['DataLoadingError', 'load_address_book', 'save_address_book']
