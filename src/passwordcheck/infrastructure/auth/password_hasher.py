"""Encrypted credential formats and verification.

When the host hands over an already-encrypted credential, the only possible
check is to ask whether the account name itself would verify against it.
This module provides that verification for the supported formats:

- Argon2id hashes (``$argon2id$...``), verified with argon2-cffi.
- Classic md5 role passwords: ``"md5" + md5(password + username)``. The
  account name acts as the salt, which is why verifiers receive it.
- SCRAM-SHA-256 secrets (RFC 5802/7677):
  ``SCRAM-SHA-256$<iterations>:<salt>$<StoredKey>:<ServerKey>`` with base64
  salt and keys.
"""

import base64
import binascii
import hashlib
import hmac
import os
from collections.abc import Iterable

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from passwordcheck.core.logging import get_logger
from passwordcheck.domain.services.collaborators import CredentialVerifier

logger = get_logger(__name__)

# Create a password hasher with secure defaults
_hasher = PasswordHasher()

MD5_PREFIX = "md5"
MD5_CREDENTIAL_LENGTH = len(MD5_PREFIX) + 32

SCRAM_PREFIX = "SCRAM-SHA-256$"
SCRAM_DEFAULT_ITERATIONS = 4096
SCRAM_SALT_LENGTH = 16


def hash_password(password: str) -> str:
    """Hash a password using Argon2id.

    Args:
        password: The plaintext password to hash.

    Returns:
        The hashed password string.

    Example:
        >>> hashed = hash_password("SecureP@ss123!")
        >>> hashed.startswith("$argon2id$")
        True
    """
    return _hasher.hash(password)


def md5_credential(password: str, username: str) -> str:
    """Build an md5 role credential.

    Args:
        password: The plaintext password.
        username: The account name, used as salt.

    Returns:
        ``"md5"`` followed by the hex digest of ``password + username``.
    """
    digest = hashlib.md5((password + username).encode("utf-8")).hexdigest()
    return MD5_PREFIX + digest


def _scram_keys(password: str, salt: bytes, iterations: int) -> tuple[bytes, bytes]:
    salted = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    client_key = hmac.new(salted, b"Client Key", hashlib.sha256).digest()
    server_key = hmac.new(salted, b"Server Key", hashlib.sha256).digest()
    return hashlib.sha256(client_key).digest(), server_key


def scram_sha256_credential(
    password: str,
    salt: bytes | None = None,
    iterations: int = SCRAM_DEFAULT_ITERATIONS,
) -> str:
    """Build a SCRAM-SHA-256 secret.

    Args:
        password: The plaintext password.
        salt: Raw salt bytes (default: 16 random bytes).
        iterations: PBKDF2 iteration count.

    Returns:
        ``SCRAM-SHA-256$<iterations>:<salt>$<StoredKey>:<ServerKey>``.
    """
    if salt is None:
        salt = os.urandom(SCRAM_SALT_LENGTH)
    stored_key, server_key = _scram_keys(password, salt, iterations)

    def b64(raw: bytes) -> str:
        return base64.b64encode(raw).decode("ascii")

    return f"{SCRAM_PREFIX}{iterations}:{b64(salt)}${b64(stored_key)}:{b64(server_key)}"


class Argon2CredentialVerifier(CredentialVerifier):
    """Verifies Argon2 hashes."""

    def handles(self, encrypted_credential: str) -> bool:
        return encrypted_credential.startswith("$argon2")

    def verify(self, account_name: str, encrypted_credential: str, candidate: str) -> bool:
        # Uses constant-time comparison internally
        try:
            return _hasher.verify(encrypted_credential, candidate)
        except (VerificationError, InvalidHashError):
            return False


class Md5CredentialVerifier(CredentialVerifier):
    """Verifies md5 role credentials salted with the account name."""

    def handles(self, encrypted_credential: str) -> bool:
        return (
            encrypted_credential.startswith(MD5_PREFIX)
            and len(encrypted_credential) == MD5_CREDENTIAL_LENGTH
        )

    def verify(self, account_name: str, encrypted_credential: str, candidate: str) -> bool:
        expected = md5_credential(candidate, account_name)
        return hmac.compare_digest(expected, encrypted_credential)


class ScramSha256CredentialVerifier(CredentialVerifier):
    """Verifies SCRAM-SHA-256 secrets.

    The account name plays no part in SCRAM; the salt and iteration count
    are stored in the secret itself.
    """

    def handles(self, encrypted_credential: str) -> bool:
        return encrypted_credential.startswith(SCRAM_PREFIX)

    def verify(self, account_name: str, encrypted_credential: str, candidate: str) -> bool:
        try:
            params, keys = encrypted_credential[len(SCRAM_PREFIX):].split("$")
            iterations_text, salt_text = params.split(":")
            stored_key_text, _ = keys.split(":")
            iterations = int(iterations_text)
            salt = base64.b64decode(salt_text, validate=True)
            stored_key = base64.b64decode(stored_key_text, validate=True)
        except (ValueError, binascii.Error):
            logger.debug("Malformed SCRAM-SHA-256 secret", account_name=account_name)
            return False

        if iterations <= 0:
            return False

        expected, _ = _scram_keys(candidate, salt, iterations)
        return hmac.compare_digest(expected, stored_key)


class DispatchingCredentialVerifier(CredentialVerifier):
    """Delegates to the first verifier that understands the credential.

    Credentials in an unknown format never verify.
    """

    def __init__(self, verifiers: Iterable[CredentialVerifier] | None = None) -> None:
        if verifiers is None:
            verifiers = (
                Argon2CredentialVerifier(),
                Md5CredentialVerifier(),
                ScramSha256CredentialVerifier(),
            )
        self.verifiers = tuple(verifiers)

    def handles(self, encrypted_credential: str) -> bool:
        return any(v.handles(encrypted_credential) for v in self.verifiers)

    def verify(self, account_name: str, encrypted_credential: str, candidate: str) -> bool:
        for verifier in self.verifiers:
            if verifier.handles(encrypted_credential):
                return verifier.verify(account_name, encrypted_credential, candidate)

        logger.debug("Unrecognised credential format, nothing to verify", account_name=account_name)
        return False
