"""Shared router helpers."""

from .error_handling import handle_idea_errors

__all__ = ["handle_idea_errors"]
