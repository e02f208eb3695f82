"""Credential verification components.

This module provides the encrypted-credential formats the policy engine can
check a password-equals-username guess against.
"""

from passwordcheck.infrastructure.auth.password_hasher import (
    Argon2CredentialVerifier,
    DispatchingCredentialVerifier,
    Md5CredentialVerifier,
    ScramSha256CredentialVerifier,
    hash_password,
    md5_credential,
    scram_sha256_credential,
)

__all__ = [
    "Argon2CredentialVerifier",
    "DispatchingCredentialVerifier",
    "Md5CredentialVerifier",
    "ScramSha256CredentialVerifier",
    "hash_password",
    "md5_credential",
    "scram_sha256_credential",
]
