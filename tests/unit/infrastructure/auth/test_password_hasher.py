"""Unit tests for encrypted credential verification."""

import base64
import hashlib
import hmac

import pytest

from passwordcheck.domain.services.collaborators import CredentialVerifier
from passwordcheck.infrastructure.auth.password_hasher import (
    Argon2CredentialVerifier,
    DispatchingCredentialVerifier,
    Md5CredentialVerifier,
    ScramSha256CredentialVerifier,
    hash_password,
    md5_credential,
    scram_sha256_credential,
)


class TestHashPassword:
    """Tests for hash_password function."""

    def test_hash_password_returns_argon2_hash(self):
        """Test that hash_password returns a valid Argon2 hash."""
        hashed = hash_password("SecureP@ss123!")

        assert hashed.startswith("$argon2id$")
        assert len(hashed) > 50  # Argon2 hashes are long

    def test_hash_password_different_for_same_input(self):
        """Test that hashing the same password twice produces different hashes (due to salt)."""
        assert hash_password("SecureP@ss123!") != hash_password("SecureP@ss123!")


class TestMd5Credential:
    """Tests for md5_credential function."""

    def test_format(self):
        """Test the credential is 'md5' plus the digest of password and user name."""
        expected = "md5" + hashlib.md5(b"secretalice").hexdigest()

        assert md5_credential("secret", "alice") == expected
        assert len(expected) == 35

    def test_username_is_salt(self):
        """Test that the same password yields different credentials per user."""
        assert md5_credential("secret", "alice") != md5_credential("secret", "bob")


class TestArgon2CredentialVerifier:
    """Tests for Argon2CredentialVerifier."""

    def test_handles_argon2_only(self):
        verifier = Argon2CredentialVerifier()

        assert verifier.handles(hash_password("x")) is True
        assert verifier.handles(md5_credential("x", "alice")) is False

    def test_verify_correct(self):
        """Test that the correct candidate verifies."""
        hashed = hash_password("SecureP@ss123!")

        assert Argon2CredentialVerifier().verify("alice", hashed, "SecureP@ss123!") is True

    def test_verify_incorrect(self):
        """Test that a wrong candidate does not verify."""
        hashed = hash_password("SecureP@ss123!")

        assert Argon2CredentialVerifier().verify("alice", hashed, "WrongPassword") is False

    def test_verify_case_sensitive(self):
        """Test that verification is case-sensitive."""
        hashed = hash_password("SecureP@ss123!")

        assert Argon2CredentialVerifier().verify("alice", hashed, "securep@ss123!") is False

    def test_malformed_hash_does_not_verify(self):
        """Test that a corrupt hash is treated as no match."""
        assert Argon2CredentialVerifier().verify("alice", "$argon2id$garbage", "alice") is False


class TestMd5CredentialVerifier:
    """Tests for Md5CredentialVerifier."""

    def test_handles(self):
        verifier = Md5CredentialVerifier()

        assert verifier.handles(md5_credential("x", "alice")) is True
        assert verifier.handles("md5short") is False
        assert verifier.handles(hash_password("x")) is False

    def test_verify_uses_account_name_as_salt(self):
        credential = md5_credential("alice", "alice")
        verifier = Md5CredentialVerifier()

        assert verifier.verify("alice", credential, "alice") is True
        assert verifier.verify("bob", credential, "alice") is False
        assert verifier.verify("alice", credential, "Alice") is False


class TestScramSha256Credential:
    """Tests for scram_sha256_credential function."""

    def test_format(self):
        """Test the secret layout and key derivation."""
        salt = b"0123456789abcdef"
        salted = hashlib.pbkdf2_hmac("sha256", b"secret", salt, 4096)
        client_key = hmac.new(salted, b"Client Key", hashlib.sha256).digest()
        server_key = hmac.new(salted, b"Server Key", hashlib.sha256).digest()
        stored_key = hashlib.sha256(client_key).digest()

        expected = "SCRAM-SHA-256$4096:{}${}:{}".format(
            base64.b64encode(salt).decode(),
            base64.b64encode(stored_key).decode(),
            base64.b64encode(server_key).decode(),
        )

        assert scram_sha256_credential("secret", salt=salt) == expected

    def test_random_salt(self):
        assert scram_sha256_credential("secret") != scram_sha256_credential("secret")


class TestScramSha256CredentialVerifier:
    """Tests for ScramSha256CredentialVerifier."""

    def test_handles(self):
        verifier = ScramSha256CredentialVerifier()

        assert verifier.handles(scram_sha256_credential("x")) is True
        assert verifier.handles(md5_credential("x", "alice")) is False
        assert verifier.handles(hash_password("x")) is False

    def test_verify_correct(self):
        credential = scram_sha256_credential("alice", iterations=1024)

        assert ScramSha256CredentialVerifier().verify("alice", credential, "alice") is True

    def test_verify_incorrect(self):
        credential = scram_sha256_credential("alice")
        verifier = ScramSha256CredentialVerifier()

        assert verifier.verify("alice", credential, "Alice") is False
        assert verifier.verify("alice", credential, "bob") is False

    def test_account_name_not_used(self):
        credential = scram_sha256_credential("secret")

        assert ScramSha256CredentialVerifier().verify("bob", credential, "secret") is True

    @pytest.mark.parametrize(
        "credential",
        [
            "SCRAM-SHA-256$4096:abc",
            "SCRAM-SHA-256$notanumber:c2FsdA==$a2V5:c2lnbmF0dXJl",
            "SCRAM-SHA-256$4096:!!!$a2V5:c2lnbmF0dXJl",
            "SCRAM-SHA-256$0:c2FsdA==$a2V5:c2lnbmF0dXJl",
        ],
    )
    def test_malformed_secret_does_not_verify(self, credential):
        """Test that a corrupt secret is treated as no match."""
        assert ScramSha256CredentialVerifier().verify("alice", credential, "alice") is False


class TestDispatchingCredentialVerifier:
    """Tests for DispatchingCredentialVerifier."""

    def test_default_verifiers(self):
        verifier = DispatchingCredentialVerifier()

        assert verifier.verify("alice", hash_password("alice"), "alice") is True
        assert verifier.verify("alice", md5_credential("alice", "alice"), "alice") is True
        assert verifier.verify("alice", scram_sha256_credential("alice"), "alice") is True
        assert verifier.verify("alice", md5_credential("other", "alice"), "alice") is False

    def test_unknown_format_never_verifies(self):
        verifier = DispatchingCredentialVerifier()

        assert verifier.handles("SHA1$alice") is False
        assert verifier.verify("alice", "SHA1$alice", "alice") is False

    def test_custom_verifiers(self):
        class AlwaysMatches(CredentialVerifier):
            def handles(self, encrypted_credential: str) -> bool:
                return True

            def verify(self, account_name: str, encrypted_credential: str, candidate: str) -> bool:
                return True

        verifier = DispatchingCredentialVerifier([AlwaysMatches()])

        assert verifier.verify("alice", "anything", "alice") is True

    def test_abstract_verifier_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            CredentialVerifier()
