"""pjar list command - print the step definition catalog."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from picklejar.cli.utils import (
    display_path,
    load_workspace_config,
    make_scanner,
    resolve_workspace,
    run_scan,
)
from picklejar.steps import Group, TreeNode, build_tree, count_leaves, filter_steps
from picklejar.steps.models import StepDefinition


def _leaf_label(
    step_def: StepDefinition, root: Path, *, show_type: bool, show_path: bool
) -> Text:
    label = Text()
    if show_type:
        label.append(f"{step_def.type} ", style="bold")
    label.append(step_def.display_text)
    if show_path:
        label.append(
            f"  {display_path(step_def.file_path, root)}:{step_def.line_number}", style="dim"
        )
    return label


def render_tree(
    nodes: list[TreeNode],
    root: Path,
    *,
    show_path: bool = True,
) -> Tree:
    """Render catalog nodes as a rich Tree.

    Leaves of a flat catalog carry their step type; grouped leaves get it
    from the enclosing type group.
    """
    tree = Tree(Text(f"Step definitions ({count_leaves(nodes)})", style="bold"))

    def _add(parent: Tree, node: TreeNode, depth: int) -> None:
        if isinstance(node, Group):
            branch = parent.add(Text(node.label, style="cyan" if depth == 0 else "magenta"))
            for child in node.children:
                _add(branch, child, depth + 1)
        else:
            parent.add(
                _leaf_label(node.definition, root, show_type=depth == 0, show_path=show_path)
            )

    for node in nodes:
        _add(tree, node, 0)
    return tree


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, path_type=Path))
@click.option("--filter", "filter_text", default="", help="Case-insensitive substring filter")
@click.option("--flat", is_flag=True, help="Do not group by file and step type")
@click.option("--no-sort", is_flag=True, help="Keep declaration order")
@click.option("--no-paths", is_flag=True, help="Hide file locations")
@click.option("--json", "as_json", is_flag=True, help="Output matching records as JSON")
def list_command(
    path: Path,
    filter_text: str,
    flat: bool,
    no_sort: bool,
    no_paths: bool,
    as_json: bool,
) -> None:
    """List step definitions in a workspace.

    PATH is the workspace root (default: current directory).
    """
    root = resolve_workspace(path)
    config = load_workspace_config(root)
    result = run_scan(make_scanner(config), root, config, quiet=as_json)

    if as_json:
        records = filter_steps(result.step_definitions, filter_text)
        click.echo(json.dumps([r.to_dict() for r in records], indent=2))
        return

    nodes = build_tree(
        result.step_definitions,
        filter_text,
        group_by_type=config.display.group_by_type and not flat,
        sort=config.display.sort_alphabetically and not no_sort,
    )
    if not nodes:
        click.echo("No matching step definitions.")
        return

    show_path = config.display.show_file_path and not no_paths
    Console(highlight=False).print(render_tree(nodes, root, show_path=show_path))
