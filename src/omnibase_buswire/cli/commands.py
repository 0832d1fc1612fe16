# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""
Bus Wiring CLI Commands.

Provides the ``buswire`` command line: ``generate`` writes the endpoint
wiring modules for a declaration graph, ``resolve`` only shows how every
consumer would be bound.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from omnibase_buswire.enums import (
    EnumAmbiguityPolicy,
    EnumBackendKind,
    EnumDiagnosticSeverity,
)
from omnibase_buswire.errors import BuswireError
from omnibase_buswire.generation import (
    ArtifactWriter,
    BindingGenerator,
    load_declaration_graph,
    load_generator_config,
    report_diagnostics,
)
from omnibase_buswire.models import (
    ModelDiagnostic,
    ModelGenerationResult,
    ModelGeneratorConfig,
)

console = Console()

_F = TypeVar("_F", bound=Callable[..., Any])

_BACKEND_CHOICES = [kind.cli_name for kind in EnumBackendKind]
_SEVERITY_STYLES: dict[EnumDiagnosticSeverity, str] = {
    EnumDiagnosticSeverity.INFO: "blue",
    EnumDiagnosticSeverity.WARNING: "yellow",
    EnumDiagnosticSeverity.ERROR: "red",
}


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Bus wiring generator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _pipeline_options(func: _F) -> _F:
    """Options shared by ``generate`` and ``resolve``."""
    func = click.option(
        "--strict-ambiguity",
        is_flag=True,
        default=False,
        help="Leave consumers with ambiguous structural matches unresolved",
    )(func)
    func = click.option(
        "--service-name",
        default=None,
        help="Service name for default endpoint names",
    )(func)
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(path_type=Path),
        default=None,
        help="Generator config YAML file",
    )(func)
    return click.argument("graph", type=click.Path(path_type=Path))(func)


def _load(
    graph_path: Path,
    config_path: Path | None,
    service_name: str | None,
    backends: tuple[str, ...],
    strict_ambiguity: bool,
) -> ModelGenerationResult:
    overrides: dict[str, object] = {
        "service_name": service_name,
        "backends": list(backends) or None,
        "ambiguity_policy": EnumAmbiguityPolicy.STRICT if strict_ambiguity else None,
    }
    config: ModelGeneratorConfig = load_generator_config(config_path, overrides)
    graph = load_declaration_graph(graph_path)
    result = BindingGenerator(config).generate(graph)
    report_diagnostics(result.diagnostics)
    return result


@cli.command("generate")
@_pipeline_options
@click.option(
    "--backend",
    "backends",
    multiple=True,
    type=click.Choice(_BACKEND_CHOICES),
    help="Backend to emit (repeatable, default: all)",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory for generated modules",
)
@click.option("--dry-run", is_flag=True, help="Show what would be written")
def generate_cmd(
    graph: Path,
    config_path: Path | None,
    service_name: str | None,
    backends: tuple[str, ...],
    strict_ambiguity: bool,
    output_dir: Path,
    dry_run: bool,
) -> None:
    """Generate endpoint wiring modules for GRAPH."""
    console.print(
        f"[bold blue]Generating bus wiring from {escape(str(graph))}...[/bold blue]"
    )
    try:
        result = _load(graph, config_path, service_name, backends, strict_ambiguity)
        writer = ArtifactWriter(output_dir, dry_run=dry_run)
        written = {path.name for path in writer.write_all(result.artifacts)}
    except BuswireError as e:
        _print_error(e)
        raise SystemExit(1) from e

    table = Table(title=f"Artifacts ({escape(result.service_name)})")
    table.add_column("File", style="cyan")
    table.add_column("Backend")
    table.add_column("Status", style="bold")
    for artifact in result.artifacts:
        if dry_run:
            status = "[yellow]dry run[/yellow]"
        elif artifact.file_name in written:
            status = "[green]written[/green]"
        else:
            status = "unchanged"
        backend = artifact.backend_kind.cli_name if artifact.backend_kind else "-"
        table.add_row(artifact.file_name, backend, status)
    console.print(table)

    _print_diagnostics(result.diagnostics)
    console.print(
        f"\n[bold]Summary: {len(result.bindings)} binding(s), "
        f"{len(result.unresolved)} unresolved[/bold]"
    )


@cli.command("resolve")
@_pipeline_options
def resolve_cmd(
    graph: Path,
    config_path: Path | None,
    service_name: str | None,
    strict_ambiguity: bool,
) -> None:
    """Show how every consumer in GRAPH is bound, without writing files."""
    try:
        result = _load(graph, config_path, service_name, (), strict_ambiguity)
    except BuswireError as e:
        _print_error(e)
        raise SystemExit(1) from e

    # Names come from the host graph and may contain markup brackets.
    table = Table(title=f"Bindings ({escape(result.service_name)})")
    table.add_column("Consumer", style="cyan")
    table.add_column("Message Type")
    table.add_column("Channel", style="green")
    table.add_column("Endpoint", style="green")
    table.add_column("Tier", style="magenta")
    for binding in result.bindings:
        table.add_row(
            escape(binding.consumer_identity),
            escape(binding.message_type_identity),
            escape(binding.channel_name),
            escape(binding.endpoint_name),
            binding.resolution_tier.value,
        )
    console.print(table)

    if result.unresolved:
        console.print("\n[bold red]Unresolved consumers:[/bold red]")
        for consumer in result.unresolved:
            console.print(
                f"  [red]{escape(consumer.identity)} -> "
                f"{escape(consumer.message_type)}[/red]"
            )

    _print_diagnostics(result.diagnostics)


def _print_error(error: BuswireError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    if error.correlation_id is not None:
        console.print(f"[dim]Correlation ID: {error.correlation_id}[/dim]")


def _print_diagnostics(diagnostics: tuple[ModelDiagnostic, ...]) -> None:
    """Print diagnostics with rich formatting."""
    if not diagnostics:
        return
    console.print("\n[bold]Diagnostics:[/bold]")
    for diagnostic in diagnostics:
        style = _SEVERITY_STYLES[diagnostic.severity]
        console.print(
            f"  [{style}]{diagnostic.severity.value}[/{style}] {escape(diagnostic.render())}"
        )


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
