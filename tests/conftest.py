"""Pytest configuration for all tests."""

import os

import pytest

from passwordcheck.core.config import get_settings
from passwordcheck.domain.entities.policy_config import PolicyConfig
from passwordcheck.domain.services.password_validator import PasswordValidator
from passwordcheck.infrastructure.auth.password_hasher import DispatchingCredentialVerifier


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Keep host environment and .env files out of every test."""
    for name in list(os.environ):
        if name.upper().startswith("PASSWORDCHECK_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def default_config() -> PolicyConfig:
    """The shipped default policy."""
    return PolicyConfig()


@pytest.fixture
def validator() -> PasswordValidator:
    """Validator with no strength oracle and the default credential verifiers."""
    return PasswordValidator(credential_verifier=DispatchingCredentialVerifier())
