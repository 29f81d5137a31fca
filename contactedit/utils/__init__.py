"""Utility modules."""

from .config import EditConfig, default_config

__all__ = ['EditConfig', 'default_config']
