from epex import bcrypt


class PasswordHasher:
    """bcrypt hashing through the app's Flask-Bcrypt extension."""

    def hash(self, plaintext: str) -> str:
        return bcrypt.generate_password_hash(plaintext).decode('utf-8')

    def compare(self, plaintext: str, digest: str) -> bool:
        if not plaintext or not digest:
            return False
        try:
            return bcrypt.check_password_hash(digest, plaintext)
        except ValueError:
            # Not a bcrypt digest
            return False
