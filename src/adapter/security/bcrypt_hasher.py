"""bcrypt implementation of PasswordHasher."""

import bcrypt

# 2^10 iterations
DEFAULT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of the secret
_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode('utf-8')[:_MAX_PASSWORD_BYTES]


class BcryptPasswordHasher:
    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(password), salt).decode('utf-8')

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode('utf-8'))
        except (ValueError, TypeError):
            return False
