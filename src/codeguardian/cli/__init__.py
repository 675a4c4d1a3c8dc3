"""CLI entry point — Click group with global options."""

from __future__ import annotations

import logging

import click

from codeguardian import __version__
from codeguardian.config import CodeGuardianConfig


@click.group()
@click.version_option(version=__version__, prog_name="codeguardian")
@click.option(
    "--api-url",
    help="Base URL of the scanning API (default: http://localhost:8085/api).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.pass_context
def main(ctx: click.Context, api_url: str | None, verbose: bool) -> None:
    """Code Guardian — scan source code for secrets and unsafe practices."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    config = CodeGuardianConfig.load()
    if api_url:
        config.api_url = api_url
    config.verbose = verbose

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


def _register_commands() -> None:
    from codeguardian.cli.samples import samples  # noqa: F811
    from codeguardian.cli.scan import scan  # noqa: F811
    from codeguardian.cli.service import health, rules, validate  # noqa: F811
    from codeguardian.cli.verify import verify  # noqa: F811

    main.add_command(scan)
    main.add_command(health)
    main.add_command(rules)
    main.add_command(validate)
    main.add_command(samples)
    main.add_command(verify)


_register_commands()
