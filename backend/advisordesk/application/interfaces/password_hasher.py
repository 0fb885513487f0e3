"""Abstract port for password hashing."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Produces salted hashes and verifies passwords against them."""

    @abstractmethod
    def hash(self, password: str) -> str:
        ...

    @abstractmethod
    def verify(self, password_hash: str, password: str) -> bool:
        """Constant-time check of ``password`` against ``password_hash``."""
        ...
