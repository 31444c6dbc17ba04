"""Command line interface for threshold secret recovery."""

from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path
from typing import Optional

import click
import yaml

from . import __version__
from .audit import AuditTrail
from .errors import RecoveryError
from .policy import policy
from .radix import decode as decode_digits
from .recovery import reconstruct
from .shares import load_container

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(__version__, prog_name="threshold-recovery")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=policy.log_level if policy.log_level in LOG_LEVELS else "WARNING",
    show_default=True,
)
def main(log_level: str) -> None:
    """Recover a threshold-shared secret and spot corrupted shares."""

    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Worker processes.")
@click.option(
    "--audit-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Write signed audit records to this directory.",
)
def recover(path: Path, as_json: bool, workers: Optional[int], audit_dir: Optional[Path]) -> None:
    """Reconstruct the secret from the share container at PATH."""

    run_policy = policy if workers is None else dataclasses.replace(policy, workers=workers)
    audit_dir = audit_dir or run_policy.audit_dir
    audit = AuditTrail(audit_dir) if audit_dir else None
    try:
        result = reconstruct(load_container(path), policy=run_policy, audit=audit)
    except RecoveryError as exc:
        raise click.ClickException(str(exc)) from exc
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise click.ClickException(f"Cannot read {path}: {exc}") from exc

    if as_json:
        click.echo(
            json.dumps(
                {
                    "secret": str(result.secret),
                    "wrong_shares": list(result.wrong_shares),
                    "votes": result.votes,
                    "witness": list(result.witness),
                }
            )
        )
    else:
        click.echo(f"Secret: {result.secret}")
        click.echo(f"Wrong shares: {list(result.wrong_shares)}")


@main.command()
@click.argument("value")
@click.option("--base", "radix", type=int, required=True, help="Radix of VALUE (2-36).")
def decode(value: str, radix: int) -> None:
    """Print VALUE, written in --base, as a decimal integer."""

    try:
        click.echo(decode_digits(value, radix))
    except RecoveryError as exc:
        raise click.ClickException(str(exc)) from exc


@main.command("verify-audit")
@click.argument("path", type=click.Path(exists=True, path_type=Path))
def verify_audit(path: Path) -> None:
    """Check an audit record, or the whole chain when PATH is a directory."""

    try:
        if path.is_dir():
            ok = AuditTrail(path).verify_chain()
        else:
            ok = AuditTrail(path.parent).verify(path)
    except (ValueError, TypeError, KeyError) as exc:
        raise click.ClickException(f"{path} is not an audit record: {exc}") from exc
    if not ok:
        raise click.ClickException(f"{path} failed verification")
    click.echo("OK")


if __name__ == "__main__":
    main()
