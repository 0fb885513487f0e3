"""Unit tests for password hashing and bearer tokens."""

from datetime import datetime, timedelta, timezone

from jose import jwt

from advisordesk.infrastructure.security import JoseTokenIssuer, WerkzeugPasswordHasher


def test_hash_is_salted_and_verifiable():
    hasher = WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")

    first = hasher.hash("secret")
    second = hasher.hash("secret")

    assert first != second
    assert hasher.verify(first, "secret")
    assert not hasher.verify(first, "Secret")
    assert not hasher.verify("", "secret")


def test_token_round_trip_carries_session_reference():
    issuer = JoseTokenIssuer(secret="s3cret", issuer="advisordesk")
    expires = datetime.now(timezone.utc) + timedelta(minutes=5)

    token = issuer.issue("user-1", "session-1", expires, role="admin")
    claims = issuer.decode(token)

    assert claims["sub"] == "user-1"
    assert claims["sid"] == "session-1"
    assert claims["role"] == "admin"
    assert claims["iss"] == "advisordesk"


def test_expired_token_is_rejected():
    issuer = JoseTokenIssuer(secret="s3cret", issuer="advisordesk")
    token = issuer.issue("user-1", "session-1", datetime.now(timezone.utc) - timedelta(minutes=1))
    assert issuer.decode(token) is None


def test_foreign_tokens_are_rejected():
    issuer = JoseTokenIssuer(secret="s3cret", issuer="advisordesk")
    expires = datetime.now(timezone.utc) + timedelta(minutes=5)

    wrong_secret = JoseTokenIssuer(secret="other", issuer="advisordesk").issue("u", "s", expires)
    wrong_issuer = jwt.encode(
        {"sub": "u", "sid": "s", "iss": "someone-else", "exp": int(expires.timestamp())},
        "s3cret",
        algorithm="HS256",
    )

    assert issuer.decode(wrong_secret) is None
    assert issuer.decode(wrong_issuer) is None
    assert issuer.decode("garbage") is None
