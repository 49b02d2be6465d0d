"""CLI for form-scan."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from form_scan import __version__
from form_scan.io import parse_query, read_forms, write_jsonl
from form_scan.pipeline import FieldSpec, scan_form
from form_scan.validation import SourceValidationError, load_schema, validate_source

app = typer.Typer(
    name="form-scan",
    help="Typed extraction of values from decoded form data.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"form-scan version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Show debug logging"),
    ] = False,
) -> None:
    """form-scan: Typed extraction of values from decoded form data."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


FieldsOption = Annotated[
    list[str],
    typer.Option(
        "--field",
        "-f",
        help="Field to scan as name:kind (kinds: int, int8..int64, uint, uint8..uint64, bool, string)",
    ),
]

SchemaOption = Annotated[
    Path | None,
    typer.Option(
        "--schema",
        "-s",
        envvar="FORM_SCAN_SOURCE_SCHEMA",
        help="Path to the source mapping schema (default: bundled schema)",
    ),
]


def _parse_specs(fields: list[str]) -> list[FieldSpec]:
    try:
        return [FieldSpec.parse(f) for f in fields]
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _load_schema(schema_path: Path | None) -> dict:
    if schema_path is not None and not schema_path.exists():
        console.print(f"[red]Error:[/red] Schema file not found: {schema_path}")
        raise typer.Exit(1)
    try:
        return load_schema(schema_path)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] Schema file is not valid JSON: {e}")
        raise typer.Exit(1)


@app.command()
def scan(
    source: Annotated[
        str,
        typer.Argument(help="Encoded form data (a=1&b=on), or a JSON object with --json"),
    ],
    fields: FieldsOption,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Treat SOURCE as a JSON source mapping"),
    ] = False,
    schema_path: SchemaOption = None,
) -> None:
    """Scan one form and print the converted values as JSON."""
    specs = _parse_specs(fields)

    if as_json:
        try:
            data = json.loads(source)
        except json.JSONDecodeError as e:
            console.print(f"[red]Error:[/red] Invalid JSON: {e}")
            raise typer.Exit(1)
        try:
            data = validate_source(data, _load_schema(schema_path))
        except SourceValidationError as e:
            console.print(f"[red]Invalid:[/red] {e}")
            raise typer.Exit(1)
    else:
        data = parse_query(source)

    result = scan_form(data, specs)
    if not result.success:
        console.print(f"[red]Error:[/red] {escape(result.error.message)}", highlight=False, soft_wrap=True)
        raise typer.Exit(1)

    console.print_json(data=[v.model_dump(mode="json") for v in result.values])


@app.command()
def run(
    input_path: Annotated[
        Path,
        typer.Option("--in", "-i", help="Input JSONL file of forms"),
    ],
    output_path: Annotated[
        Path,
        typer.Option("--out", "-o", help="Output JSONL file of scan results"),
    ],
    fields: FieldsOption,
    schema_path: SchemaOption = None,
) -> None:
    """Scan every form in a JSONL file and write one result per line.

    Each input line is a JSON object (a decoded source mapping) or a JSON
    string holding encoded form data.
    """
    if not input_path.exists():
        console.print(f"[red]Error:[/red] Input file not found: {input_path}")
        raise typer.Exit(1)

    specs = _parse_specs(fields)
    schema = _load_schema(schema_path)

    console.print(f"[bold]form-scan[/bold] v{__version__}")
    console.print(f"  Input: {input_path}")
    console.print(f"  Output: {output_path}")
    console.print(f"  Fields: {', '.join(f'{s.name}:{s.kind}' for s in specs)}")

    try:
        sources = [validate_source(form, schema) for form in read_forms(input_path)]
    except (ValueError, SourceValidationError) as e:
        console.print(f"\n[red]Error:[/red] {e}")
        raise typer.Exit(1)

    results: list[dict] = []
    success_count = 0
    failed_count = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Scanning forms...", total=None)

        for form_num, source in enumerate(sources, 1):
            result = scan_form(source, specs)
            results.append(result.model_dump(mode="json"))

            if result.success:
                success_count += 1
            else:
                failed_count += 1

            progress.update(task, description=f"Scanned {form_num} forms...")

    written = write_jsonl(output_path, results)

    console.print("\n[bold]Summary:[/bold]")
    console.print(f"  Forms scanned: {success_count + failed_count}")
    console.print(f"  [green]Success:[/green] {success_count}")
    if failed_count:
        console.print(f"  [red]Failed:[/red] {failed_count}")
    console.print(f"  Results written: {written}")


@app.command()
def validate(
    source_path: Annotated[
        Path,
        typer.Argument(help="Path to a JSON source mapping"),
    ],
    schema_path: SchemaOption = None,
) -> None:
    """Validate a JSON source mapping against the schema."""
    if not source_path.exists():
        console.print(f"[red]Error:[/red] Source file not found: {source_path}")
        raise typer.Exit(1)

    schema = _load_schema(schema_path)

    with open(source_path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            console.print(f"[red]Invalid:[/red] not valid JSON: {e}")
            raise typer.Exit(1)

    try:
        validate_source(data, schema)
        console.print(f"[green]Valid:[/green] {source_path}")
    except SourceValidationError as e:
        console.print(f"[red]Invalid:[/red] {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
