import pytest
from jose import jwt

from practicals.core.config import settings
from practicals.core.errors import UnauthorizedError
from practicals.core.security import create_access_token, decode_access_token, hash_password, verify_password


def test_hash_password_is_salted_and_verifiable():
    first = hash_password("secret123")
    second = hash_password("secret123")

    assert first != second
    assert first.startswith("$2")
    assert verify_password("secret123", first)
    assert not verify_password("wrong", first)


def test_verify_password_with_non_bcrypt_value():
    assert verify_password("secret123", "plaintext") is False


def test_access_token_carries_subject():
    token = create_access_token(42)

    payload = decode_access_token(token)

    assert payload["sub"] == "42"
    assert payload["exp"] > payload["iat"]


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode({"sub": "1"}, "another-secret", algorithm=settings.ALGORITHM)

    with pytest.raises(UnauthorizedError) as exc_info:
        decode_access_token(token)
    assert exc_info.value.code == "INVALID_TOKEN"


def test_token_without_subject_is_rejected():
    token = jwt.encode({"role": "user"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    with pytest.raises(UnauthorizedError):
        decode_access_token(token)
