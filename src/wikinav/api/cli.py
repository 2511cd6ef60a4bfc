"""wikinav command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import click
from pydantic import ValidationError

from wikinav import __version__
from wikinav.application.resolve_links import DocumentLinkResolver
from wikinav.config.logging import configure_logging
from wikinav.config.settings import Settings
from wikinav.domain.enums import NormalizationStrategy
from wikinav.domain.errors import WikiNavError
from wikinav.domain.naming import NameNormalizer, sanitize_file_name
from wikinav.infrastructure.parsing.wiki_links import LinkParser

STRATEGY_CHOICE = click.Choice([s.value for s in NormalizationStrategy])


def _load_settings(**overrides: object) -> Settings:
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise click.ClickException(f"Invalid configuration: {problems}") from exc


@click.group()
@click.version_option(__version__, prog_name="wikinav")
@click.option("--log-level", default=None, help="Override WIKINAV_LOG_LEVEL")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Parse wiki-links and map page names to file names."""
    settings = _load_settings()
    if log_level:
        settings = settings.model_copy(update={"log_level": log_level.upper()})
    configure_logging(settings.log_level, settings.log_format)
    ctx.obj = settings


@cli.command("parse")
@click.argument("link_text")
def parse_cmd(link_text: str) -> None:
    """Parse the interior of a [[...]] link."""
    try:
        link = LinkParser().parse(link_text)
    except WikiNavError as exc:
        raise click.ClickException(f"{exc.message}: {link_text!r}") from exc
    click.echo(json.dumps(link.to_dict(), ensure_ascii=False))


@cli.command("filename")
@click.argument("page_name")
@click.option("--strategy", "-s", type=STRATEGY_CHOICE, default=None, help="Naming strategy")
@click.option("--sanitize/--no-sanitize", default=True, help="Apply filesystem sanitization")
@click.pass_obj
def filename_cmd(settings: Settings, page_name: str, strategy: str | None, sanitize: bool) -> None:
    """Print the file name a page name maps to."""
    normalizer = NameNormalizer(strategy or settings.slug_strategy)
    name = normalizer.to_file_name(page_name)
    click.echo(sanitize_file_name(name) if sanitize else name)


@cli.command("links")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--strategy", "-s", type=STRATEGY_CHOICE, default=None, help="Naming strategy")
@click.option("--root", "-r", default=None, help="Vault root joined with file names")
@click.option("--extension", "-e", default=None, help="Note extension, e.g. .md")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
@click.pass_obj
def links_cmd(
    settings: Settings,
    path: Path,
    strategy: str | None,
    root: str | None,
    extension: str | None,
    as_json: bool,
) -> None:
    """List the targets of every wiki-link in a markdown file."""
    overrides: dict[str, object] = {}
    if strategy:
        overrides["slug_strategy"] = NormalizationStrategy(strategy)
    if root is not None:
        overrides["vault_root"] = root
    if extension is not None:
        overrides["note_extension"] = extension
    if overrides:
        settings = _load_settings(**{**settings.model_dump(), **overrides})

    resolver = DocumentLinkResolver.from_settings(settings)
    result = resolver.resolve(path.read_text(encoding="utf-8"))

    if as_json:
        data = {
            "resolved": [
                {
                    "line": r.occurrence.line + 1,
                    "column": r.occurrence.column + 1,
                    "link": r.link.to_dict(),
                    "file_name": r.file_name,
                    "target": str(r.target),
                }
                for r in result.resolved
            ],
            "skipped": [
                {
                    "line": s.occurrence.line + 1,
                    "column": s.occurrence.column + 1,
                    "raw": s.occurrence.raw,
                    "kind": s.error.kind.value,
                }
                for s in result.skipped
            ],
        }
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    for r in result.resolved:
        click.echo(f"{r.occurrence.line + 1}:{r.occurrence.column + 1}\t{r.link.page_name}\t{r.target}")
    for s in result.skipped:
        click.echo(
            f"{s.occurrence.line + 1}:{s.occurrence.column + 1}\tskipped ({s.error.kind.value})\t{s.occurrence.raw!r}",
            err=True,
        )


def main() -> None:
    """Entry point for the wikinav script."""
    cli()


if __name__ == "__main__":
    main()
