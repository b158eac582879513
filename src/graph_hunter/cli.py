"""graph-hunter - Command Line Interface.

Finds circular dependencies and dead code in a code graph exported by a
code-analysis service.
"""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .analyzers.dependency_analyzer import DependencyAnalyzer
from .exceptions import GraphHunterError
from .graph.graph_builder import GraphBuilder
from .graph.models import CodeGraph, load_graph
from .utils.config import config, parse_pattern_list
from .utils.logger import setup_logger


console = Console()

graph_argument = click.argument(
    "graph_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)


def ignore_options(func):
    """Shared --ignore / --ignore-json options."""
    func = click.option(
        "--ignore-json",
        default=None,
        help='Ignore patterns as a JSON array (e.g. \'["**/generated/**"]\')'
    )(func)
    func = click.option(
        "--ignore", "-i",
        multiple=True,
        help="Extra glob pattern to ignore (e.g., '**/generated/**')"
    )(func)
    return func


def _collect_ignore_patterns(ignore, ignore_json) -> list[str]:
    patterns = list(config.ignore_patterns)
    patterns.extend(ignore)
    if ignore_json:
        try:
            patterns.extend(parse_pattern_list(ignore_json))
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--ignore-json")
    return patterns


def _load(graph_file: Path) -> CodeGraph:
    try:
        graph = load_graph(graph_file)
    except GraphHunterError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise click.ClickException(str(e))

    if graph.is_empty:
        console.print(f"[yellow]Graph in {escape(str(graph_file))} has no nodes or relationships[/yellow]")

    return graph


def _write_output(output: Path, payload: str) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload, encoding="utf-8")
    console.print(f"\n[green]Results written to:[/green] {escape(str(output))}")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML configuration file (default: ./graph-hunter.yaml)"
)
@click.pass_context
def cli(ctx, verbose, config_path):
    """graph-hunter - Find circular dependencies and dead code in a code graph."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    try:
        config.load(config_path)
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}")

    level = "DEBUG" if verbose else config.get("logging.level", "INFO")
    setup_logger(level=level, log_file=config.log_file)


@cli.command()
@graph_argument
@ignore_options
@click.option("--markdown", "-m", is_flag=True, help="Print the markdown report instead of a table")
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None, help="Write cycles as JSON")
@click.option("--fail-on-cycles", is_flag=True, help="Exit with status 1 if cycles are found")
def cycles(graph_file, ignore, ignore_json, markdown, output, fail_on_cycles):
    """Detect circular dependencies between files.

    Example:
        graph-hunter cycles graph.json
        graph-hunter cycles graph.json -i '**/generated/**' --fail-on-cycles
    """
    graph = _load(graph_file)
    analyzer = DependencyAnalyzer(graph, _collect_ignore_patterns(ignore, ignore_json), config.max_rows)

    try:
        with console.status("[bold blue]Detecting circular dependencies...[/bold blue]"):
            result = analyzer.detect_circular_dependencies()
    except GraphHunterError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise click.ClickException(str(e))

    if markdown:
        console.print(result.format(), markup=False, highlight=False, soft_wrap=True)
    else:
        _display_cycles(result)

    if output:
        _write_output(output, result.to_json())

    fail_on_cycles = fail_on_cycles or config.get("report.fail_on_cycles", False)
    if fail_on_cycles and result.total_cycles > 0:
        sys.exit(1)


@cli.command("dead-code")
@graph_argument
@ignore_options
@click.option("--markdown", "-m", is_flag=True, help="Print the markdown report instead of a table")
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None, help="Write findings as JSON")
@click.option("--fail-on-dead-code", is_flag=True, help="Exit with status 1 if dead code is found")
def dead_code(graph_file, ignore, ignore_json, markdown, output, fail_on_dead_code):
    """Detect functions that are never called.

    Example:
        graph-hunter dead-code graph.json
        graph-hunter dead-code graph.json --markdown -o dead-code.json
    """
    graph = _load(graph_file)
    analyzer = DependencyAnalyzer(graph, _collect_ignore_patterns(ignore, ignore_json), config.max_rows)

    try:
        with console.status("[bold blue]Running dead code detection...[/bold blue]"):
            result = analyzer.detect_dead_code()
    except GraphHunterError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise click.ClickException(str(e))

    if markdown:
        console.print(result.format(), markup=False, highlight=False, soft_wrap=True)
    else:
        _display_dead_code(result)

    if output:
        _write_output(output, result.to_json())

    fail_on_dead_code = fail_on_dead_code or config.get("report.fail_on_dead_code", False)
    if fail_on_dead_code and result.total_unreachable > 0:
        sys.exit(1)


@cli.command()
@graph_argument
@ignore_options
def analyze(graph_file, ignore, ignore_json):
    """Run both circular dependency and dead code detection.

    Example:
        graph-hunter analyze graph.json
    """
    graph = _load(graph_file)
    analyzer = DependencyAnalyzer(graph, _collect_ignore_patterns(ignore, ignore_json), config.max_rows)

    try:
        cycle_result = analyzer.detect_circular_dependencies()
        dead_result = analyzer.detect_dead_code()
    except GraphHunterError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise click.ClickException(str(e))

    console.print(Panel(
        f"Circular dependencies: [bold]{cycle_result.total_cycles}[/bold]\n"
        f"Potentially unused functions: [bold]{dead_result.total_unreachable}[/bold]",
        title=escape(str(graph_file)),
        border_style="red" if cycle_result.total_cycles or dead_result.total_unreachable else "green"
    ))

    _display_cycles(cycle_result)
    console.print()
    _display_dead_code(dead_result)


@cli.command()
@graph_argument
@ignore_options
@click.option("--samples", default=20, show_default=True, help="Number of sample relationships to show")
def stats(graph_file, ignore, ignore_json, samples):
    """Show statistics about a code graph.

    Example:
        graph-hunter stats graph.json
    """
    graph = _load(graph_file)
    builder = GraphBuilder(_collect_ignore_patterns(ignore, ignore_json))

    try:
        statistics = builder.compute_statistics(graph, sample_size=samples)
    except GraphHunterError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise click.ClickException(str(e))

    _display_statistics(statistics)


# ===== HELPER FUNCTIONS =====

def _display_cycles(result):
    """Display circular dependencies as a table."""
    if result.total_cycles == 0:
        console.print("[green]No circular dependencies found![/green]")
        return

    table = Table(title=f"Circular Dependencies ({result.total_cycles})")
    table.add_column("#", style="magenta", justify="right")
    table.add_column("Length", style="yellow", justify="right")
    table.add_column("Cycle", style="cyan")

    for i, cycle in enumerate(result.cycles[:result.max_rows], 1):
        table.add_row(str(i), str(cycle.length), escape(" -> ".join(cycle.closed_path)))

    console.print(table)
    if result.total_cycles > result.max_rows:
        console.print(f"[dim]... and {result.total_cycles - result.max_rows} more[/dim]")


def _display_dead_code(result):
    """Display potentially unused functions as a table."""
    if result.total_unreachable == 0:
        console.print("[green]No dead code found![/green]")
        return

    table = Table(title=f"Potentially Unused Functions ({result.total_unreachable})")
    table.add_column("Function", style="green")
    table.add_column("File", style="blue")
    table.add_column("Line", style="magenta", justify="right")

    for dc in result.functions[:result.max_rows]:
        table.add_row(escape(dc.name), escape(dc.file_path), str(dc.start_line) if dc.start_line else "")

    console.print(table)
    if result.total_unreachable > result.max_rows:
        console.print(f"[dim]... and {result.total_unreachable - result.max_rows} more[/dim]")


def _display_statistics(stats):
    """Display graph statistics."""
    graph_table = Table(title="Graph Statistics", show_header=False)
    graph_table.add_column("Metric", style="cyan")
    graph_table.add_column("Value", style="green", justify="right")
    graph_table.add_row("Total Nodes", str(stats.total_nodes))
    graph_table.add_row("File/Module Nodes", str(stats.file_nodes))
    graph_table.add_row("Ignored Nodes", str(stats.ignored_nodes))
    graph_table.add_row("Total Relationships", str(stats.total_relationships))
    graph_table.add_row("Dependency Relationships", str(stats.dependency_edges))
    graph_table.add_row("Call Relationships", str(stats.call_edges))
    graph_table.add_row("Dependency Graph Paths", str(stats.dependency_paths))
    graph_table.add_row("Dependency Graph Links", str(stats.dependency_links))
    console.print(graph_table)
    console.print()

    if stats.nodes_by_label:
        nodes_table = Table(title="Nodes by Label")
        nodes_table.add_column("Label", style="cyan")
        nodes_table.add_column("Count", style="green", justify="right")
        for label, count in sorted(stats.nodes_by_label.items(), key=lambda x: -x[1]):
            nodes_table.add_row(escape(label), str(count))
        console.print(nodes_table)
        console.print()

    if stats.relationships_by_type:
        edges_table = Table(title="Relationships by Type")
        edges_table.add_column("Type", style="yellow")
        edges_table.add_column("Count", style="green", justify="right")
        for rel_type, count in sorted(stats.relationships_by_type.items(), key=lambda x: -x[1]):
            edges_table.add_row(escape(rel_type) or "(untyped)", str(count))
        console.print(edges_table)
        console.print()

    if stats.sample_edges:
        sample_table = Table(title=f"Sample Relationships ({len(stats.sample_edges)})")
        sample_table.add_column("Type", style="yellow")
        sample_table.add_column("Start", style="cyan")
        sample_table.add_column("End", style="cyan")
        for edge in stats.sample_edges:
            sample_table.add_row(escape(edge["type"]), escape(str(edge["startNode"])), escape(str(edge["endNode"])))
        console.print(sample_table)

    if stats.total_nodes and stats.dependency_edges == 0:
        console.print(Panel(
            "[yellow]No dependency relationships found[/yellow]",
            title="Quality Warnings", border_style="yellow"
        ))


if __name__ == "__main__":
    cli()
