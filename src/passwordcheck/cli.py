"""Command-line interface for passwordcheck.

This module provides commands for checking a password against the
configured policy and inspecting that policy.
"""

from typing import NoReturn

import click

from passwordcheck import __version__
from passwordcheck.core.config import get_settings
from passwordcheck.core.exceptions import PasswordRejectedError, PolicyCheckUnavailableError
from passwordcheck.core.logging import configure_logging
from passwordcheck.domain.entities.evaluation import PasswordType
from passwordcheck.domain.entities.policy_config import PolicyConfig
from passwordcheck.infrastructure.auth.password_hasher import (
    hash_password,
    md5_credential,
    scram_sha256_credential,
)
from passwordcheck.infrastructure.hooks import PasswordCheckHook

EXIT_REJECTED = 1
EXIT_UNAVAILABLE = 2


@click.group()
@click.version_option(version=__version__, prog_name="passwordcheck")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides environment)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """passwordcheck - configurable password acceptability policy.

    Policy parameters are read from PASSWORDCHECK_* environment variables
    or a .env file.
    """
    settings = get_settings()
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings)
    ctx.obj = settings


@cli.command()
@click.option("--username", required=True, help="Account name the password belongs to")
@click.option(
    "--password",
    type=str,
    default=None,
    help="Password to check (prompts if not provided)",
)
@click.option(
    "--type",
    "password_type",
    type=click.Choice([t.value for t in PasswordType]),
    default=PasswordType.PLAINTEXT.value,
    show_default=True,
    help="Form of the password; anything but plaintext is treated as encrypted",
)
@click.pass_obj
def check(settings, username: str, password: str | None, password_type: str) -> None:
    """Check a password against the policy.

    Exits with status 0 when the password is accepted, 1 when it is
    rejected, and 2 when a mandatory strength check could not run.
    """
    if password is None:
        password = click.prompt("Password", hide_input=True)

    hook = PasswordCheckHook.from_settings(settings)
    try:
        hook(username, password, PasswordType(password_type))
    except PasswordRejectedError as e:
        click.echo(f"Rejected ({e.code}): {e.message}", err=True)
        raise SystemExit(EXIT_REJECTED)
    except PolicyCheckUnavailableError as e:
        click.echo(f"Error: password check unavailable: {e}", err=True)
        raise SystemExit(EXIT_UNAVAILABLE)

    click.echo("OK")


@cli.command()
@click.pass_obj
def show_config(settings) -> None:
    """Print the resolved password policy."""
    config = PolicyConfig.from_settings(settings)
    click.echo(f"min_length: {config.min_length}")
    click.echo(f"max_length: {config.max_length}")
    click.echo(f"min_lower_char: {config.min_lower}")
    click.echo(f"min_upper_char: {config.min_upper}")
    click.echo(f"min_digit_char: {config.min_digit}")
    click.echo(f"min_special_char: {config.min_special}")
    click.echo(f"disallowed_chars: {config.disallowed_chars!r}")
    click.echo(f"use_external_strength_check: {config.use_external_strength_check}")
    click.echo(f"strength_check_mandatory: {config.strength_check_mandatory}")
    click.echo(f"strength_min_score: {settings.strength_min_score}")


@cli.command(name="hash")
@click.option("--username", required=True, help="Account name (salt for md5)")
@click.option(
    "--password",
    type=str,
    default=None,
    help="Password to encrypt (prompts if not provided)",
)
@click.option(
    "--method",
    type=click.Choice(["argon2", "md5", "scram-sha-256"]),
    default="argon2",
    show_default=True,
)
def hash_command(username: str, password: str | None, method: str) -> None:
    """Print an encrypted credential for use with 'check --type'."""
    if password is None:
        password = click.prompt("Password", hide_input=True, confirmation_prompt=True)

    if method == "md5":
        click.echo(md5_credential(password, username))
    elif method == "scram-sha-256":
        click.echo(scram_sha256_credential(password))
    else:
        click.echo(hash_password(password))


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `passwordcheck` command is run
    or when using `python -m passwordcheck`.
    """
    cli()
