"""User interfaces for ContactEdit."""
