"""gqlnaming CLI — entry point for all commands."""

from __future__ import annotations

from pathlib import Path

import typer
from graphql import GraphQLSchema
from rich import print as rprint
from rich.markup import escape
from rich.table import Table

from gqlnaming import __version__
from gqlnaming.config import NamingConfig
from gqlnaming.errors import GqlNamingError


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gqlnaming {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="gqlnaming",
    help="File-path-driven naming conventions for GraphQL fragments and operations.",
    no_args_is_help=True,
)


def _load(
    config_path: Path | None, schema_path: Path | None,
) -> tuple[NamingConfig, GraphQLSchema | None]:
    """Load config and schema; --schema overrides the config's `schema:`."""
    from gqlnaming.config import load_config
    from gqlnaming.schema.loader import load_schema

    try:
        config = load_config(config_path)
        schema_path = schema_path or config.resolved_schema_path()
        schema = load_schema(schema_path) if schema_path is not None else None
    except GqlNamingError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)
    return config, schema


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: N803
        None, "--version", "-V", callback=version_callback, is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log scan progress."),
) -> None:
    """gqlnaming — GraphQL naming conventions from file paths."""
    from gqlnaming.log import setup_logging

    setup_logging("DEBUG" if verbose else None)


@app.command()
def check(
    paths: list[Path] = typer.Argument(exists=True, help="Files or directories to scan"),
    schema: Path | None = typer.Option(None, "--schema", "-s", help="SDL file or directory"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to .gqlnaming.yaml"),
    markdown: bool = typer.Option(False, "--markdown", help="Print a markdown report"),
) -> None:
    """Check fragment and operation names against their file paths."""
    from gqlnaming.lint.scanner import format_report, scan_paths

    naming_config, graphql_schema = _load(config, schema)
    result = scan_paths(paths, config=naming_config, schema=graphql_schema)

    if markdown:
        typer.echo(format_report(result))
    elif result.violations:
        table = Table(title="Naming Violations")
        table.add_column("Location")
        table.add_column("Rule")
        table.add_column("Severity")
        table.add_column("Message")
        table.add_column("Suggestion")
        for v in result.violations:
            table.add_row(
                escape(f"{v.file}:{v.line}:{v.column}"),
                v.rule,
                v.severity,
                escape(v.detail),
                escape(v.suggestion or ""),
            )
        rprint(table)
    else:
        rprint(f"[green]No naming violations[/green] in {result.files_scanned} file(s).")

    if not result.ok:
        raise typer.Exit(1)


@app.command()
def expected(
    path: str = typer.Argument(help="File path the definition lives in"),
    type_name: str = typer.Argument(help="GraphQL type name"),
    skip_dir: list[str] | None = typer.Option(
        None, "--skip-dir", help="Directory name to skip (repeatable; replaces defaults)",
    ),
) -> None:
    """Show the expected name for a type defined in PATH."""
    from gqlnaming.naming.names import generate_expected_name
    from gqlnaming.naming.paths import PathOptions, calculate_prefix_with_type_name

    options = PathOptions(skip_dirs=skip_dir or None)
    prefix = calculate_prefix_with_type_name(path, type_name, options)
    rprint(f"  Prefix:   {prefix or '(empty)'}")
    rprint(f"  Expected: {generate_expected_name(prefix, type_name)}")


@app.command()
def fix(
    file: Path = typer.Argument(exists=True, dir_okay=False, help="File to fix"),
    schema: Path | None = typer.Option(None, "--schema", "-s", help="SDL file or directory"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to .gqlnaming.yaml"),
) -> None:
    """Print FILE with every naming violation renamed to its expected name."""
    from gqlnaming.lint.scanner import apply_fixes, scan_source

    naming_config, graphql_schema = _load(config, schema)
    try:
        text = file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        rprint(f"[red]Error:[/red] Cannot read {escape(str(file))}: {escape(str(e))}")
        raise typer.Exit(2)

    violations = scan_source(text, str(file), config=naming_config, schema=graphql_schema)
    typer.echo(apply_fixes(text, violations), nl=False)
