"""Errors raised by the storage layer."""


class StorageError(Exception):
    """A statement against the users table failed."""


class UserNotFoundError(StorageError):
    """No row matched the requested user id."""

    def __init__(self, user_id: int):
        super().__init__(f"user {user_id} not found")
        self.user_id = user_id
