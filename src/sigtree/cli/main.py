"""sigtree CLI - type signature parsing and comparison tool.

This module provides the command-line interface for sigtree, enabling
descriptor parsing, JSON export, and graded or strict tree comparison.
"""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from sigtree.core.errors import (
    MalformedDescriptorError,
    SerializationError,
    SigtreeError,
    TypeMismatchError,
)

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="sigtree",
    help="Parse type signatures into trees and grade how they relate",
    no_args_is_help=True,
)

# Rich console for formatted output
console = Console()
err_console = Console(stderr=True)

# Global verbose flag
_verbose: bool = False


def set_verbose(verbose: bool) -> None:
    """Set global verbose mode."""
    global _verbose
    _verbose = verbose


def print_exception(e: Exception) -> None:
    """Print exception details in verbose mode."""
    if _verbose:
        err_console.print("\n[dim]--- Traceback (verbose mode) ---[/dim]")
        err_console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output with full tracebacks"),
    ] = False,
) -> None:
    """sigtree CLI - type signature trees."""
    set_verbose(verbose)


def fail(message: str, e: Exception) -> NoReturn:
    """Print an error line (plus traceback when verbose) and exit with code 1."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    print_exception(e)
    raise typer.Exit(1)


@app.command()
def parse(
    descriptor: Annotated[str, typer.Argument(help="Type descriptor, e.g. 'Map<String, List<Integer>>'")],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the tree as JSON instead of a rendered tree"),
    ] = False,
) -> None:
    """Parse a descriptor and show its type tree.

    Example:
        sigtree parse "java.util.Map<String, List<Integer>>"
        sigtree parse "Map<K, V>" --json
    """
    from sigtree.cli._render import build_type_tree
    from sigtree.core.serializer import serialize
    from sigtree.parser import SignatureParser

    try:
        node = SignatureParser().parse(descriptor)
    except MalformedDescriptorError as e:
        fail(str(e), e)

    if as_json:
        # Plain print keeps the JSON free of rich markup
        print(serialize(node))
    else:
        console.print(build_type_tree(node))


@app.command()
def compare(
    left: Annotated[str, typer.Argument(help="Left-hand descriptor")],
    right: Annotated[str, typer.Argument(help="Right-hand descriptor")],
    hierarchy: Annotated[
        Optional[Path],
        typer.Option(
            "--hierarchy",
            "-H",
            help="JSON file mapping type names to their supertypes "
            "(defaults to resolving Python classes by import)",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with code 1 unless the trees are identical"),
    ] = False,
) -> None:
    """Grade how two descriptors relate.

    Example:
        sigtree compare "F<object, bool>" "F<int, bool>"
        sigtree compare "F<Object>" "F<Integer>" --hierarchy types.json --strict
    """
    from sigtree.cli._render import build_comparison_table
    from sigtree.client import SignatureClient
    from sigtree.resolvers import HierarchyResolver, ImportResolver

    try:
        resolver = (
            HierarchyResolver.from_file(hierarchy) if hierarchy is not None else ImportResolver()
        )
    except SerializationError as e:
        fail(f"{e.message}: {e.details}", e)

    client = SignatureClient(resolver)
    try:
        left_node = client.parse(left)
        right_node = client.parse(right)
        grade = client.graded_compare(left_node, right_node)
    except SigtreeError as e:
        fail(str(e), e)

    console.print(build_comparison_table(left_node, right_node, grade))

    if strict:
        try:
            client.strict_compare(left_node, right_node)
        except TypeMismatchError as e:
            err_console.print(f"[red]✗[/red] {escape(str(e))}")
            print_exception(e)
            raise typer.Exit(1)
        console.print("[green]✓[/green] Types match")


if __name__ == "__main__":
    app()
