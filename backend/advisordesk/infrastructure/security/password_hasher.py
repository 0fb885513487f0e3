"""Password hashing adapter backed by werkzeug.security."""

from werkzeug.security import check_password_hash, generate_password_hash

from advisordesk.application.interfaces import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted hashes in werkzeug's ``method$salt$hash`` format."""

    def __init__(self, method: str = "scrypt"):
        self._method = method

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method)

    def verify(self, password_hash: str, password: str) -> bool:
        if not password_hash:
            return False
        return check_password_hash(password_hash, password)
