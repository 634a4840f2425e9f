# File: users_api/core/security.py

"""
Password hashing helpers.

Stored passwords have the form ``<salt>$<hash>``:
  - salt: random bytes, base64 encoded
  - hash: HMAC-SHA512 of the plaintext password keyed with the salt text,
    base64 encoded
"""

import base64
import hashlib
import hmac
import secrets
from typing import Optional

from users_api.core.config import settings

SEPARATOR = "$"


def make_salt(nbytes: Optional[int] = None) -> str:
    """Return ``nbytes`` random bytes as base64 text."""
    raw = secrets.token_bytes(nbytes or settings.salt_bytes)
    return base64.b64encode(raw).decode("ascii")


def _digest(password: str, salt: str) -> str:
    mac = hmac.new(salt.encode("utf-8"), password.encode("utf-8"), hashlib.sha512)
    return base64.b64encode(mac.digest()).decode("ascii")


def hash_password(password: str, salt: Optional[str] = None) -> str:
    """
    Salt and hash a plaintext password.

    A fresh salt is drawn on every call unless one is passed in, so hashing
    the same password twice gives two different stored values.
    """
    if salt is None:
        salt = make_salt()
    return salt + SEPARATOR + _digest(password, salt)


def verify_password(password: str, stored: str) -> bool:
    """Constant-time check of ``password`` against a ``<salt>$<hash>`` value."""
    salt, sep, expected = (stored or "").partition(SEPARATOR)
    if not sep or not salt or not expected:
        return False
    return hmac.compare_digest(_digest(password, salt), expected)
