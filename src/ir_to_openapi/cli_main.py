"""Command-line interface for the ir-to-openapi compiler."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from ir_to_openapi import __version__
from ir_to_openapi.cli.exception_handler import handle_exceptions
from ir_to_openapi.config import CompilerConfig, load_config
from ir_to_openapi.models import (
    DEFAULT_INFO,
    DEFAULT_SERVERS,
    IntermediateRepresentation,
    load_ir_file,
    parse_info,
    parse_servers,
)
from ir_to_openapi.render.openapi import OutputFormat

logger = logging.getLogger(__name__)

# Create Typer app
app = typer.Typer(
    name="ir-to-openapi",
    help="Compile an API intermediate representation into OpenAPI, Markdown and Mermaid.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich consoles for output
console = Console()
error_console = Console(stderr=True, style="bold red")

InputArgument = Annotated[
    Path,
    typer.Argument(
        help="IR file (.json/.yaml/.yml) or a source directory to run the parser on.",
        exists=True,
        file_okay=True,
        dir_okay=True,
        readable=True,
        resolve_path=True,
    ),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Compiler configuration file (YAML/JSON).",
        exists=True,
        dir_okay=False,
        resolve_path=True,
    ),
]
ForceOption = Annotated[
    bool,
    typer.Option("--force", help="Overwrite output files if they exist."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-V", help="Show debug logging and full tracebacks."),
]


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"ir-to-openapi version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compile an API intermediate representation (IR).

    The IR is produced by an upstream source parser. Pass either the IR file
    itself or the source directory; in the latter case the configured parser
    command is run first.
    """


def _load_input(input_path: Path, config: CompilerConfig) -> IntermediateRepresentation:
    """Load an IR file, or run the upstream parser on a directory."""
    if input_path.is_dir():
        from ir_to_openapi.parser import ParserRunner

        return ParserRunner(config.parser_command).run(input_path)
    return load_ir_file(input_path)


def _check_outputs(outputs: list[Path | None], force: bool) -> None:
    """Refuse to run when any output file exists and ``force`` is not set."""
    if force:
        return

    for output in outputs:
        if output is not None and output.exists():
            error_console.print(
                f"\n✗ Output file already exists: {output}\nUse --force to overwrite."
            )
            raise typer.Exit(code=1)


def _write_output(text: str, output: Path | None, force: bool) -> None:
    """Write text to ``output``, or to stdout when no path is given."""
    if output is None:
        typer.echo(text, nl=False)
        return

    _check_outputs([output], force)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    logger.info("Wrote %d bytes to %s", len(text.encode("utf-8")), output)
    console.print(f"[bold green]✓ Wrote {output}[/bold green]")


@app.command()
@handle_exceptions()
def openapi(
    input_path: InputArgument,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file. Defaults to stdout.",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option(
            "--format",
            "-f",
            help="Document encoding. Defaults to the output suffix, else yaml.",
            case_sensitive=False,
        ),
    ] = None,
    info: Annotated[
        str,
        typer.Option("--info", help='API info as key="value" pairs separated by commas.'),
    ] = DEFAULT_INFO,
    servers: Annotated[
        str,
        typer.Option("--servers", help='Servers as key="value" pairs; ";" separates servers.'),
    ] = DEFAULT_SERVERS,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Refuse to compile an IR that fails the lint."),
    ] = False,
    config_file: ConfigOption = None,
    force: ForceOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Compile the IR into an OpenAPI 3 document.

    Examples
    --------
        ir-to-openapi openapi ir.json
        ir-to-openapi openapi ir.json -o openapi.yaml
        ir-to-openapi openapi src/main/java -o api.json --info 'title="Shop",version="2.0"'
        ir-to-openapi openapi ir.json --servers 'url="https://a";url="https://b"'

    """
    from ir_to_openapi.render.openapi import dump_openapi, format_for_suffix
    from ir_to_openapi.transform import IRToOpenAPITransformer
    from ir_to_openapi.validation import IRValidator

    configure_logging(verbose)
    _check_outputs([output], force)
    config = load_config(config_file)
    api_info = parse_info(info)
    server_list = parse_servers(servers)

    ir = _load_input(input_path, config)

    if strict:
        IRValidator(config, strict=True).validate_and_raise(ir)

    document = IRToOpenAPITransformer(config).transform(ir, api_info, server_list or None)

    if output_format is None:
        output_format = format_for_suffix(output.suffix) if output else OutputFormat.YAML

    _write_output(dump_openapi(document, output_format), output, force)


@app.command()
@handle_exceptions()
def tables(
    input_path: InputArgument,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Endpoint table file. Defaults to stdout.",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    models_output: Annotated[
        Path | None,
        typer.Option(
            "--models",
            "-m",
            help="Separate file for the model reference.",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    config_file: ConfigOption = None,
    force: ForceOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Render the endpoint table and the model reference as Markdown.

    Without --models both tables go to the same output under their own
    headings.

    Examples
    --------
        ir-to-openapi tables ir.json
        ir-to-openapi tables ir.json -o endpoints.md --models models.md

    """
    from ir_to_openapi.render.markdown import render_endpoint_table, render_model_reference
    from ir_to_openapi.views.tables import build_endpoint_table, build_model_reference

    configure_logging(verbose)
    _check_outputs([output, models_output], force)
    config = load_config(config_file)
    ir = _load_input(input_path, config)

    endpoint_text = render_endpoint_table(build_endpoint_table(ir.endpoints, config.default_group))
    model_text = render_model_reference(build_model_reference(ir.models))

    if models_output is not None:
        _write_output(model_text, models_output, force)
        _write_output(endpoint_text, output, force)
        return

    combined = f"## Endpoints\n\n{endpoint_text}\n## Models\n\n{model_text}"
    _write_output(combined, output, force)


@app.command()
@handle_exceptions()
def diagram(
    input_path: InputArgument,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Endpoint map file. Defaults to stdout.",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    dependencies_output: Annotated[
        Path | None,
        typer.Option(
            "--dependencies",
            "-d",
            help="Also write the controller dependency graph to this file.",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    config_file: ConfigOption = None,
    force: ForceOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Render Mermaid flowcharts of the endpoints and their dependencies.

    Examples
    --------
        ir-to-openapi diagram ir.json
        ir-to-openapi diagram ir.json -o endpoints.mmd --dependencies deps.mmd

    """
    from ir_to_openapi.grouping.paths import group_endpoints
    from ir_to_openapi.render.mermaid import render_dependency_graph, render_endpoint_map
    from ir_to_openapi.views.graph import build_dependency_graph

    configure_logging(verbose)
    _check_outputs([output, dependencies_output], force)
    config = load_config(config_file)
    ir = _load_input(input_path, config)

    if dependencies_output is not None:
        graph = build_dependency_graph(ir.endpoints, config)
        _write_output(render_dependency_graph(graph, config), dependencies_output, force)

    groups = group_endpoints(ir.endpoints, config.default_group)
    _write_output(render_endpoint_map(groups), output, force)


@app.command()
@handle_exceptions()
def validate(
    input_path: InputArgument,
    strict: Annotated[
        bool,
        typer.Option("--strict", "-s", help="Treat warnings as errors."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only output problems, no success messages."),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format for lint results: text, table, tree.",
        ),
    ] = "text",
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Lint the IR for fallbacks and inconsistencies.

    Errors always fail the command; warnings fail it only with --strict.
    Informational notes are printed with --verbose.

    Examples
    --------
        ir-to-openapi validate ir.json
        ir-to-openapi validate ir.json --strict
        ir-to-openapi validate ir.json --format table

    """
    from ir_to_openapi.cli.error_formatter import ErrorFormatter, ErrorTable, ErrorTree
    from ir_to_openapi.validation import IRValidator

    configure_logging(verbose)
    config = load_config(config_file)
    ir = _load_input(input_path, config)

    result = IRValidator(config, strict=strict).validate(ir)
    failed = not result.is_valid or (strict and bool(result.warnings))

    if result.errors or result.warnings or (verbose and result.infos):
        if output_format == "table":
            ErrorTable(error_console).print_result(result)
        elif output_format == "tree":
            ErrorTree(error_console).print_result(result)
        else:
            ErrorFormatter(error_console, show_infos=verbose).format_validation_result(
                result, input_path
            )

    if failed:
        raise typer.Exit(code=1)

    if not quiet:
        if result.warnings:
            console.print(
                f"\n[bold yellow]⚠ {input_path.name} is valid with warnings[/bold yellow]\n"
            )
        else:
            console.print(f"\n[bold green]✓ {input_path.name} is valid[/bold green]\n")


@app.command()
@handle_exceptions()
def info(
    input_path: InputArgument,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Display a summary of the IR.

    Examples
    --------
        ir-to-openapi info ir.json

    """
    configure_logging(verbose)
    config = load_config(config_file)
    ir = _load_input(input_path, config)

    console.print(
        Panel.fit(
            f"[bold]API Intermediate Representation[/bold]\nInput: {input_path}",
            title="Input Info",
        )
    )
    _print_summary(ir, config)


def _print_summary(ir: IntermediateRepresentation, config: CompilerConfig) -> None:
    """Print a summary of the IR contents."""
    from ir_to_openapi.grouping.dependencies import aggregate_dependencies
    from ir_to_openapi.grouping.paths import group_endpoints

    table = Table(title="IR Summary", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    enums = sum(1 for model in ir.models if model.is_enumeration)
    table.add_row("Models", str(len(ir.models)))
    table.add_row("  Enumerations", str(enums))
    table.add_row("  Objects", str(len(ir.models) - enums))

    table.add_row("", "")  # Spacer
    table.add_row("Endpoints", str(len(ir.endpoints)))
    table.add_row("Paths", str(len({endpoint.path for endpoint in ir.endpoints})))
    groups = group_endpoints(ir.endpoints, config.default_group)
    table.add_row("Groups", ", ".join(group.name for group in groups) or "-")

    index = aggregate_dependencies(ir.endpoints)
    table.add_row("", "")  # Spacer
    table.add_row("Controllers", str(len(ir.controller_names)))
    table.add_row("Services", str(len(index.services)))
    core = [s for s in index.services if index.is_core(s, config.core_service_threshold)]
    if core:
        table.add_row("Core services", ", ".join(core))

    console.print(table)


if __name__ == "__main__":
    app()
