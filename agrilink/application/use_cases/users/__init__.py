"""Use cases for managing users."""

from .update_profile import update_profile

__all__ = ["update_profile"]
