"""CLI entry point for api-opener."""

import json
import logging
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from api_opener.assemble import build_document, filter_routes
from api_opener.config import DocsConfig, load_docs_config
from api_opener.schemas.presets import list_presets


class _NoAliasDumper(yaml.SafeDumper):
    """Shared schema dicts must not turn into YAML anchors."""

    def ignore_aliases(self, data):
        return True


def _load_and_build(doc_path: Path, only: tuple[str, ...]) -> tuple[DocsConfig, dict]:
    """Load a definition file and build its document, reporting failures as ClickException."""
    try:
        config = load_docs_config(doc_path)
        return config, build_document(config, only=only)
    except (ValidationError, yaml.YAMLError) as e:
        raise click.ClickException(f"Invalid definition file {doc_path}:\n{e}") from e
    except ValueError as e:
        # Builder errors are ValueError subclasses carrying the offending field
        field = getattr(e, "field", None)
        prefix = f"[{field}] " if field else ""
        raise click.ClickException(f"{prefix}{e}") from e


def _dump(document: dict, fmt: str) -> str:
    if fmt == "yaml":
        return yaml.dump(document, Dumper=_NoAliasDumper, sort_keys=False, allow_unicode=True)
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def _resolve_format(output: Path, fmt: str) -> str:
    if fmt != "auto":
        return fmt
    return "yaml" if output.suffix.lower() in (".yaml", ".yml") else "json"


def _count_operations(document: dict) -> int:
    return sum(len(methods) for methods in document["paths"].values())


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """api-opener: build OpenAPI 3.1 documents from definition files."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(dir_okay=False, path_type=Path), help="Output file for the OpenAPI document.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Output format (auto picks by file extension).")
@click.option("--only", multiple=True, help='Only include matching routes, e.g. "POST /pets" or "/pets/*". Repeatable.')
def build(doc_path: Path, output: Path, fmt: str, only: tuple[str, ...]):
    """Build an OpenAPI document from a definition file."""
    click.echo(f"Reading {doc_path}...")
    config, document = _load_and_build(doc_path, only)
    selected = len(filter_routes(config.routes, only))
    click.echo(
        f"Built {len(document['paths'])} paths ({_count_operations(document)} operations) "
        f"from {selected} of {len(config.routes)} routes."
    )

    fmt = _resolve_format(output, fmt)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(_dump(document, fmt), encoding="utf-8")
    click.echo(f"Document saved to {output} ({fmt})")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--only", multiple=True, help="Only check matching routes. Repeatable.")
def check(doc_path: Path, only: tuple[str, ...]):
    """Validate a definition file without writing anything."""
    config, document = _load_and_build(doc_path, only)
    click.echo(f"{doc_path}: OK")
    click.echo(f"  Title: {document['info']['title']} {document['info']['version']}")
    click.echo(f"  Paths: {len(document['paths'])}")
    click.echo(f"  Operations: {_count_operations(document)}")
    click.echo(f"  Schemas: {len(config.definitions or {})}")


@main.command()
@click.option("--kind", default=None, type=click.Choice(["string", "number", "integer", "array", "object"]), help="Only list presets of this kind.")
def presets(kind: str | None):
    """List the available schema presets."""
    for preset_kind, names in list_presets().items():
        if kind and preset_kind != kind:
            continue
        click.echo(f"{preset_kind}: {', '.join(names)}")
