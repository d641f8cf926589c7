import bcrypt

from messagely.core.config import Settings
from messagely.core.exceptions import InvalidPasswordError

# bcrypt only reads this many bytes of the password
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """One-way bcrypt hashing with a configurable work factor"""

    def __init__(self, settings: Settings):
        self.work_factor = settings.BCRYPT_WORK_FACTOR

    def hash(self, password: str) -> str:
        """Hash password using bcrypt; every call draws a fresh salt"""
        encoded = password.encode('utf-8')
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise InvalidPasswordError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded"
            )
        salt = bcrypt.gensalt(rounds=self.work_factor)
        return bcrypt.hashpw(encoded, salt).decode('utf-8')

    def verify(self, password: str, hashed: str) -> bool:
        """Verify password against hash; anything malformed is a mismatch"""
        try:
            encoded = password.encode('utf-8')
            # Such a password could never have been hashed
            if len(encoded) > MAX_PASSWORD_BYTES:
                return False
            return bcrypt.checkpw(encoded, hashed.encode('utf-8'))
        except (ValueError, TypeError, AttributeError):
            return False
