"""CLI entry point for postcorpus."""

import logging
import sys
import time
from pathlib import Path
from typing import Literal

import click

from postcorpus.cli.summary import LoadSummary
from postcorpus.contracts.document import DocumentRecord
from postcorpus.corpus.discovery import scan_corpus
from postcorpus.corpus.loader import CorpusLoader, LoadResult
from postcorpus.export.manifest import ManifestFormat, build_manifest, write_manifest
from postcorpus.settings import get_settings


def load_corpus(corpus_path: Path, extensions: list[str], workers: int = 1) -> LoadResult:
    """Scan and load the corpus; a missing directory ends the command with status 1."""
    try:
        discovery = scan_corpus(corpus_path, extensions)
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    return CorpusLoader(workers=workers).load_discovered(discovery)


def _ordered(result: LoadResult, sort: str) -> list[DocumentRecord]:
    if sort == "date":
        return result.chronological()
    return list(result.records)


def _report_errors(result: LoadResult) -> None:
    for failure in result.errors:
        click.echo(f"  ✗ {failure.source}: [{failure.kind}] {failure.error}", err=True)


@click.group()
@click.option(
    "--corpus",
    "-c",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Path to the posts directory (default: CORPUS_PATH or _posts/)",
)
@click.option(
    "--workers",
    "-w",
    type=click.IntRange(min=1),
    default=None,
    help="Parse posts in a thread pool of this size",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: LOG_LEVEL or WARNING)",
)
@click.pass_context
def app(
    ctx: click.Context,
    corpus: Path | None,
    workers: int | None,
    log_level: str | None,
):
    """postcorpus - validate and export a front-matter blog post corpus."""
    ctx.ensure_object(dict)

    settings = get_settings()

    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    ctx.obj["corpus_path"] = corpus or Path(settings.corpus_path)
    ctx.obj["extensions"] = settings.corpus_extensions
    ctx.obj["workers"] = workers or settings.load_workers


@app.command()
@click.pass_context
def check(ctx: click.Context):
    """Validate every post; exit with status 1 if any is rejected."""
    started = time.perf_counter()
    result = load_corpus(
        ctx.obj["corpus_path"], ctx.obj["extensions"], workers=ctx.obj["workers"]
    )
    summary = LoadSummary.from_result(
        result, ctx.obj["corpus_path"], time.perf_counter() - started
    )
    for line in summary.lines():
        click.echo(line)

    if result.warnings:
        click.echo("\nWarnings:")
        for source, warning in result.warnings:
            click.echo(f"  ! {source}: {warning}")

    if result.errors:
        click.echo(f"\n{len(result.errors)} of {result.total} post(s) rejected:", err=True)
        _report_errors(result)
        sys.exit(1)

    click.echo(f"\nAll {result.total} post(s) valid.")


@app.command(name="list")
@click.option(
    "--sort",
    type=click.Choice(["input", "date"]),
    default="input",
    help="Order of the listing (input = discovery order)",
)
@click.option("--category", type=str, default=None, help="Only list posts in this category")
@click.pass_context
def list_posts(ctx: click.Context, sort: Literal["input", "date"], category: str | None):
    """List loaded posts."""
    result = load_corpus(
        ctx.obj["corpus_path"], ctx.obj["extensions"], workers=ctx.obj["workers"]
    )

    records = _ordered(result, sort)
    if category is not None:
        records = [r for r in records if r.category == category]

    for record in records:
        label = f"[{record.category}] " if record.category else ""
        click.echo(f"{record.published_date.isoformat()}  {record.slug:<30} {label}{record.title}")

    if result.errors:
        click.echo(f"\n{len(result.errors)} post(s) rejected, run 'check' for details", err=True)


@app.command()
@click.argument("slug")
@click.pass_context
def show(ctx: click.Context, slug: str):
    """Show metadata and body of one post."""
    result = load_corpus(
        ctx.obj["corpus_path"], ctx.obj["extensions"], workers=ctx.obj["workers"]
    )

    record = result.get(slug)
    if record is None:
        click.echo(f"Post not found: {slug}", err=True)
        sys.exit(1)

    click.echo(f"=== {record.title} ===")
    click.echo(f"Slug: {record.slug}")
    click.echo(f"Date: {record.published_date.isoformat()}")
    click.echo(f"Category: {record.category or '-'}")
    if record.layout:
        click.echo(f"Layout: {record.layout}")
    for key, value in record.extra.items():
        click.echo(f"{key}: {value}")
    click.echo(f"Excerpt: {record.excerpt}")
    click.echo(f"Source: {record.source}")
    click.echo()
    click.echo(record.body)


@app.command()
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "yaml"]),
    default=None,
    help="Manifest format (default: from the file extension, else json)",
)
@click.option(
    "--sort",
    type=click.Choice(["input", "date"]),
    default="input",
    help="Order of records in the manifest",
)
@click.option("--strict", is_flag=True, help="Refuse to export if any post is rejected")
@click.pass_context
def export(
    ctx: click.Context,
    output: Path,
    fmt: ManifestFormat | None,
    sort: Literal["input", "date"],
    strict: bool,
):
    """Export loaded posts and load errors as a manifest."""
    result = load_corpus(
        ctx.obj["corpus_path"], ctx.obj["extensions"], workers=ctx.obj["workers"]
    )

    if strict and result.errors:
        click.echo(f"Export aborted, {len(result.errors)} post(s) rejected:", err=True)
        _report_errors(result)
        sys.exit(1)

    if fmt is None:
        fmt = "yaml" if output.suffix in (".yaml", ".yml") else "json"

    manifest = build_manifest(result, ctx.obj["corpus_path"], order=sort)
    path = write_manifest(manifest, output, fmt)

    click.echo(f"Exported {len(manifest.records)} post(s) to {path}")
    if manifest.errors:
        click.echo(f"{len(manifest.errors)} post(s) rejected, listed in the manifest", err=True)
