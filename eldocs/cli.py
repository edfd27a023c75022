"""
eldocs CLI - Component documentation extraction tool

A command-line tool for building a normalized component catalog by:
1. Reading the structured catalog, narrative docs and type declarations
2. Merging them into one record per component
3. Writing the catalog plus filtered docs for redistribution

It also answers lookups against a generated catalog.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from eldocs import __version__
from eldocs.config import PipelineConfig
from eldocs.exceptions import ElDocsError
from eldocs.generator import ComponentDocsGenerator
from eldocs.query import ComponentIndex

app = typer.Typer(
    name="eldocs",
    help="Component documentation extraction tool",
    add_completion=False,
)

console = Console()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_CATALOG = "data/components.json"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def _fail(error: Exception) -> None:
    console.print(f"\n[red]❌ Error: {error}[/red]")
    raise typer.Exit(1)


def _print_json(data) -> None:
    console.print_json(json.dumps(data, ensure_ascii=False))


@app.command()
def extract(
    source: Optional[str] = typer.Option(
        None,
        "--source",
        "-s",
        help="Component library checkout (default: $ELDOCS_SOURCE_ROOT)",
    ),
    catalog: Optional[str] = typer.Option(None, "--catalog", help="web-types.json path"),
    components_dir: Optional[str] = typer.Option(None, "--components-dir", help="Directory with one folder per component"),
    docs_dir: Optional[str] = typer.Option(None, "--docs-dir", help="Narrative markdown directory"),
    types_dir: Optional[str] = typer.Option(None, "--types-dir", help="Type declaration directory"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help=f"Catalog output (default: {DEFAULT_CATALOG})"),
    docs_output: Optional[str] = typer.Option(None, "--docs-output", help="Filtered docs output (default: data/docs)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Merge records without writing anything"),
    verbose: bool = typer.Option(False, "--verbose", help="Debug logging"),
):
    """
    Extract and merge component documentation.

    Example:
        eldocs extract --source ../element --output data/components.json
    """
    _configure_logging(verbose)

    try:
        config = PipelineConfig.from_env(
            source_root=source,
            catalog_path=catalog,
            components_dir=components_dir,
            docs_dir=docs_dir,
            types_dir=types_dir,
            output_path=output,
            docs_output_dir=docs_output,
        )
    except ValueError as e:
        _fail(e)

    console.print(Panel.fit(
        "[bold cyan]Component Documentation Extraction[/bold cyan]\n\n"
        f"Source: [yellow]{config.source_root}[/yellow]\n"
        f"Catalog: [yellow]{config.catalog_path}[/yellow]\n"
        f"Output: [yellow]{config.output_path}[/yellow]",
        border_style="cyan"
    ))

    generator = ComponentDocsGenerator(config)

    try:
        if dry_run:
            records = generator.build_records()
            console.print(f"\n[bold green]✅ Merged {len(records)} components (dry run)[/bold green]")
            return

        with console.status("[bold green]Processing..."):
            result = generator.generate()
    except (ElDocsError, ValueError) as e:
        _fail(e)

    console.print("\n[bold green]✅ Extraction Complete![/bold green]\n")

    summary = Table(show_header=True, header_style="bold cyan")
    summary.add_column("Metric")
    summary.add_column("Value", justify="right")
    summary.add_row("Components", str(result.total_components))
    summary.add_row("Props", str(result.total_props))
    summary.add_row("Events", str(result.total_events))
    summary.add_row("Slots", str(result.total_slots))
    summary.add_row("Methods", str(result.total_methods))
    summary.add_row("Without catalog entry", str(len(result.missing_catalog_entries)))
    summary.add_row("Without document", str(len(result.missing_docs)))
    summary.add_row("Without declarations", str(len(result.missing_declarations)))
    summary.add_row("Failed writes", str(len(result.failed_writes)))
    console.print(summary)

    console.print(f"\n📄 Catalog: [cyan]{result.catalog_path}[/cyan]")
    console.print(f"📁 Docs: [cyan]{result.docs_output_dir}[/cyan]")


def _load_index(catalog: str) -> ComponentIndex:
    try:
        return ComponentIndex.load(Path(catalog))
    except (FileNotFoundError, ElDocsError) as e:
        _fail(e)


@app.command("list")
def list_components(
    catalog: str = typer.Option(DEFAULT_CATALOG, "--catalog", "-c", help="Generated catalog"),
    keyword: Optional[str] = typer.Option(None, "--search", "-k", help="Filter by tag or description"),
):
    """List components in a generated catalog."""
    index = _load_index(catalog)
    components = index.search(keyword) if keyword else list(index.components.values())

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Tag")
    table.add_column("Description")
    for component in components:
        table.add_row(component.tag_name, component.description or "")
    console.print(table)
    console.print(f"\n[dim]{len(components)} of {len(index.components)} components[/dim]")


@app.command()
def show(
    tag_name: str = typer.Argument(..., help="Component tag, e.g. el-button"),
    catalog: str = typer.Option(DEFAULT_CATALOG, "--catalog", "-c", help="Generated catalog"),
):
    """Print one component record."""
    index = _load_index(catalog)
    try:
        _print_json(index.get_component(tag_name).to_json_dict())
    except ElDocsError as e:
        _fail(e)


def _field_command(field: str):
    def command(
        tag_name: str = typer.Argument(..., help="Component tag, e.g. el-button"),
        name: Optional[str] = typer.Option(None, "--name", "-n", help=f"Only this {field[:-1]}"),
        catalog: str = typer.Option(DEFAULT_CATALOG, "--catalog", "-c", help="Generated catalog"),
    ):
        index = _load_index(catalog)
        try:
            items, total = getattr(index, f"get_{field}")(tag_name, name)
        except ElDocsError as e:
            _fail(e)
        _print_json({
            "tagName": tag_name,
            field: [item.model_dump(by_alias=True, exclude_none=True) for item in items],
            "total": total,
        })

    command.__doc__ = f"Show the {field} of a component."
    return command


for _field in ("props", "events", "slots", "methods"):
    app.command(_field)(_field_command(_field))


@app.command()
def examples(
    tag_name: str = typer.Argument(..., help="Component tag, e.g. el-button"),
    index: Optional[int] = typer.Option(None, "--index", "-i", help="Zero-based example index"),
    catalog: str = typer.Option(DEFAULT_CATALOG, "--catalog", "-c", help="Generated catalog"),
    docs_dir: Optional[str] = typer.Option(None, "--docs-dir", help="Filtered docs (default: <catalog dir>/docs)"),
):
    """Show demo examples from a component's filtered document."""
    try:
        component_index = ComponentIndex.load(Path(catalog), Path(docs_dir) if docs_dir else None)
        items, total = component_index.get_examples(tag_name, index)
    except (ElDocsError, FileNotFoundError) as e:
        _fail(e)

    _print_json({
        "tagName": tag_name,
        "examples": [example.model_dump() for example in items],
        "total": total,
    })


@app.command()
def version():
    """Show version information."""
    console.print(f"eldocs version {__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
