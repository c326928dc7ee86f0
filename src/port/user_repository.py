from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""
    def create(self, name: str, email: str, password_hash: str) -> User:
        """Create a new user.

        Raises DuplicateResourceError when the email is already taken.
        """
        ...

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email, including the password hash. Return None if not found."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID with the password hash left out. Return None if not found."""
        ...
