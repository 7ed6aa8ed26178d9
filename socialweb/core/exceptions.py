# File: socialweb/core/exceptions.py


class SocialWebError(Exception):
    """Base exception for the service layer."""


class UserNotFoundError(SocialWebError):
    """Raised when no user exists for the requested id."""

    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class PersistenceError(SocialWebError):
    """Raised when the store rejects a write."""
