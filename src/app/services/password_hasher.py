from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """One-way password hashing port"""

    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def compare(self, password: str, hashed: str) -> bool:
        pass
