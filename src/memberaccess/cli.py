"""Command-line interface for memberaccess using Click."""
from __future__ import annotations

import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Final

import click

from memberaccess.config import load_config
from memberaccess.constants import OPTION_TOKENS, __version__
from memberaccess.explain import RULE_INFO, format_rule_detail
from memberaccess.options import WarningReporter
from memberaccess.runner import CheckResult, check_paths, format_results
from memberaccess.types import ConfigError, MemberAccessConfig


def format_config_text(*, config: MemberAccessConfig) -> str:
    """Format configuration as human-readable text."""
    lines: list[str] = [
        "memberaccess Configuration",
        "=" * 40,
        "",
        f"Config file: {config.config_path or '(defaults)'}",
        f"Options: {', '.join(config.options) or '(none)'}",
        "",
        "File Discovery:",
        f"  Include: {', '.join(config.include)}",
        f"  Exclude: {', '.join(config.exclude[:5])}{'...' if len(config.exclude) > 5 else ''}",
    ]
    return "\n".join(lines)


def format_config_json(*, config: MemberAccessConfig) -> str:
    """Format configuration as JSON."""
    data: dict[str, Any] = {
        "config_path": str(config.config_path) if config.config_path else None,
        "options": list(config.options),
        "include": list(config.include),
        "exclude": list(config.exclude),
    }
    return json.dumps(data, indent=2)


class ConfigType(click.ParamType):
    """Custom Click parameter type for config path."""

    name: str = "path"

    def convert(
        self,
        value: str | Path | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Path | None:
        if value is None:
            return None
        return Path(value)


CONFIG_TYPE: Final[ConfigType] = ConfigType()


@click.group()
@click.version_option(version=__version__, prog_name="memberaccess")
@click.option(
    "--config",
    "config_path",
    type=CONFIG_TYPE,
    default=None,
    help="Path to pyproject.toml (default: search upward from current directory)",
)
@click.option("--verbose", is_flag=True, help="Show progress and timing")
@click.option("--debug", is_flag=True, help="Show detailed trace")
@click.pass_context
def cli(
    ctx: click.Context,
    *,
    config_path: Path | None,
    verbose: bool,
    debug: bool,
) -> None:
    """memberaccess - Require explicit visibility on TypeScript class members."""
    level: int = (
        logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    )
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )

    ctx.ensure_object(dict)
    try:
        cfg: MemberAccessConfig = load_config(path=config_path)
        ctx.obj["config"] = cfg
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        if e.path:
            click.echo(f"  in: {e.path}", err=True)
        ctx.exit(1)


@cli.command()
@click.option("--validate", is_flag=True, help="Only validate configuration, don't print")
@click.option("--json", "as_json", is_flag=True, help="Output configuration as JSON")
@click.pass_context
def config(ctx: click.Context, *, validate: bool, as_json: bool) -> None:
    """Show or validate configuration."""
    cfg: MemberAccessConfig = ctx.obj["config"]

    if validate:
        click.echo(f"Configuration valid: {cfg.config_path or '(defaults)'}")
        return

    if as_json:
        click.echo(format_config_json(config=cfg))
    else:
        click.echo(format_config_text(config=cfg))


@cli.command()
@click.argument("paths", nargs=-1, type=click.Path(exists=True, path_type=Path))
@click.option(
    "-o",
    "--option",
    "options",
    multiple=True,
    type=click.Choice(sorted(OPTION_TOKENS)),
    help="Rule option (repeatable, overrides config)",
)
@click.pass_context
def check(
    ctx: click.Context,
    paths: tuple[Path, ...],
    *,
    options: tuple[str, ...],
) -> None:
    """Check tree files and print diagnostics as JSON."""
    cfg: MemberAccessConfig = ctx.obj["config"]

    if options:
        cfg = replace(cfg, options=options)

    if not paths:
        paths = (Path("."),)

    try:
        result: CheckResult = check_paths(
            paths=paths, config=cfg, reporter=WarningReporter(),
        )
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
        return

    click.echo(format_results(result=result))
    ctx.exit(result.exit_code)


@cli.command()
def explain() -> None:
    """Show rule documentation and options."""
    click.echo(format_rule_detail(info=RULE_INFO))


def main() -> None:
    """Main entry point for memberaccess CLI."""
    cli()


if __name__ == "__main__":
    main()
