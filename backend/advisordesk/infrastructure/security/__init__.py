from .password_hasher import WerkzeugPasswordHasher
from .token_issuer import JoseTokenIssuer

__all__ = ["WerkzeugPasswordHasher", "JoseTokenIssuer"]
