from typing import Protocol


class PasswordHasher(Protocol):
    """One-way, salted, adaptive-cost password hashing."""
    def hash(self, password: str) -> str:
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time check of a plaintext password against a stored digest."""
        ...
