"""Host integration hooks."""

from passwordcheck.infrastructure.hooks.check_password_hook import PasswordCheckHook

__all__ = ["PasswordCheckHook"]
