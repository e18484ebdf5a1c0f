"""Command line interface for sharding and recombining secret files."""

from __future__ import annotations

import logging

import click

from shardkit import __version__
from shardkit.audit import AuditError
from shardkit.combine import combine_secret
from shardkit.errors import ShamirError
from shardkit.policy import policy
from shardkit.resources import ResourceError
from shardkit.sharding import shard_secret
from shardkit.validation import (
    ValidationIssue,
    collect_issues,
    validate_output_path,
    validate_secret_path,
    validate_shards_dir,
)


def _raise_first(issues: list[ValidationIssue]) -> None:
    if issues:
        issue = issues[0]
        raise click.BadParameter(issue.message, param_hint=issue.field)


@click.group(help="Split secrets into shards with Shamir's Secret Sharing.")
@click.version_option(__version__, prog_name="shardkit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("secret_path", type=click.Path(dir_okay=False))
@click.argument("shards_path", type=click.Path(file_okay=False))
@click.option(
    "-p",
    "--parts",
    type=int,
    default=policy.default_parts,
    show_default=True,
    help="Number of parts to split the secret into.",
)
@click.option(
    "-t",
    "--threshold",
    type=int,
    default=policy.default_threshold,
    show_default=True,
    help="Threshold number of parts required to recombine the secret.",
)
def shard(secret_path: str, shards_path: str, parts: int, threshold: int) -> None:
    """Shard a secret into shards."""
    _raise_first(
        collect_issues(
            validate_secret_path(secret_path),
            validate_shards_dir(shards_path, must_exist=False),
        )
    )
    try:
        shard_secret(secret_path, shards_path, parts, threshold)
    except AuditError as exc:
        # Shards are already on disk when the audit record fails.
        raise click.ClickException(f"shards were written to {shards_path}, but {exc}") from exc
    except (ShamirError, ResourceError, OSError) as exc:
        raise click.ClickException(str(exc)) from exc

    click.secho("Sharding complete!", fg="green")
    click.echo(
        "Secret at {} was split into {} parts with a threshold of {}.".format(
            click.style(shards_path, fg="bright_blue"),
            click.style(str(parts), fg="cyan"),
            click.style(str(threshold), fg="cyan"),
        )
    )


@main.command()
@click.argument("shards_dir", type=click.Path(file_okay=False))
@click.argument("recovered_secret_path", type=click.Path(dir_okay=False))
def combine(shards_dir: str, recovered_secret_path: str) -> None:
    """Combine shards into a secret."""
    _raise_first(
        collect_issues(
            validate_shards_dir(shards_dir),
            validate_output_path(recovered_secret_path, source_path=shards_dir),
        )
    )
    try:
        combine_secret(shards_dir, recovered_secret_path)
    except AuditError as exc:
        raise click.ClickException(
            f"recovered secret was written to {recovered_secret_path}, but {exc}"
        ) from exc
    except (ShamirError, ResourceError, OSError) as exc:
        raise click.ClickException(str(exc)) from exc

    click.secho("Combine complete!", fg="green")
    click.echo(
        "Recovered secret saved to {}".format(
            click.style(recovered_secret_path, fg="bright_blue")
        )
    )


if __name__ == "__main__":
    main()
