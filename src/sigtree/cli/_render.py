"""Rich renderables used by the CLI.

Kept separate to keep the command module focused on CLI wiring.
"""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from sigtree.core.models import Grade, TypeNode

GRADE_DESCRIPTIONS = {
    Grade.UNRELATED: "[red]unrelated[/red]",
    Grade.EQUAL: "[green]equal[/green]",
    Grade.LEFT_ANCESTOR: "[cyan]left is broader[/cyan]",
    Grade.RIGHT_ANCESTOR: "[cyan]right is broader[/cyan]",
    Grade.CONFLICT: "[yellow]conflicting[/yellow]",
}


def build_type_tree(node: TypeNode) -> Tree:
    """Build a rich Tree mirroring a TypeNode tree."""
    tree = Tree(f"[bold]{escape(node.name)}[/bold]")
    _add_children(tree, node)
    return tree


def _add_children(branch: Tree, node: TypeNode) -> None:
    for child in node.children:
        _add_children(branch.add(escape(child.name)), child)


def build_comparison_table(left: TypeNode, right: TypeNode, grade: Grade) -> Table:
    """Build a (Left, Right, Grade, Meaning) table for `compare`."""
    table = Table(show_header=True)
    table.add_column("Left")
    table.add_column("Right")
    table.add_column("Grade", justify="right")
    table.add_column("Meaning")
    table.add_row(
        escape(left.to_descriptor()),
        escape(right.to_descriptor()),
        str(int(grade)),
        GRADE_DESCRIPTIONS[grade],
    )
    return table
