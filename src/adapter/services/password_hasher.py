import bcrypt

from src.app.services.password_hasher import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt with a configurable cost factor"""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(self.rounds)).decode()

    def compare(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode(), hashed.encode())
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
