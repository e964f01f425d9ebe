"""CLI entry point for Term Atlas."""

import json
import logging
from itertools import combinations
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from .config import load_config, load_group_names, DEFAULT_CONFIG

console = Console()


@click.group()
@click.option("--config", "-c", "config_path", default=None, help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config_path, verbose):
    """Term Atlas - lay out related terms as clustered, force-directed maps."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _get_config(ctx) -> dict:
    return load_config(ctx.obj.get("config_path"))


def _load(path, config):
    from .ingest.loader import load_records

    try:
        return load_records(path, config)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[red]{e}[/]")
        return None


@cli.command()
@click.option("--path", default=None, help="Where to write the config (default: ./config/config.yaml)")
def init(path):
    """Write a starter configuration file."""
    import yaml

    config_file = Path(path) if path else Path.cwd() / "config" / "config.yaml"
    if config_file.exists():
        console.print(f"[yellow]Config already exists: {config_file}[/]")
        return

    config_file.parent.mkdir(parents=True, exist_ok=True)
    header = (
        "# Display names for group keys, e.g.\n"
        "# group_names:\n"
        "#   1: Slang\n"
        "#   2: Idiom\n\n"
    )
    config_file.write_text(header + yaml.safe_dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False))
    console.print(f"[bold green]✓ Created config: {config_file}[/]")


@cli.command()
@click.argument("path")
@click.option("--names", default=None, help="YAML/JSON file mapping group keys to display names")
@click.option("--output", "-o", default=None, help="Write the full layout as JSON to this file")
@click.pass_context
def layout(ctx, path, names, output):
    """Compute the atlas layout for a record file."""
    from .layout import build_atlas

    config = _get_config(ctx)
    records = _load(path, config)
    if records is None:
        return
    if not records:
        console.print("[yellow]No records to lay out.[/]")
        return

    group_names = None
    if names:
        try:
            group_names = load_group_names(names)
        except (ValueError, FileNotFoundError) as e:
            console.print(f"[red]{e}[/]")
            return

    console.print(f"[blue]Laying out {len(records)} record(s)...[/]")
    clusters = build_atlas(records, config, names=group_names)

    table = Table(title="Atlas Clusters")
    table.add_column("Key", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Members", justify="right")
    table.add_column("Shown", justify="right")
    table.add_column("Centroid", justify="right", style="green")
    table.add_column("Keywords", max_width=40)

    for c in clusters:
        table.add_row(
            str(c.key),
            c.name,
            str(c.member_count),
            str(len(c.nodes)),
            f"{c.centroid.x:.1f}, {c.centroid.y:.1f}",
            ", ".join(c.keywords),
        )
    console.print(table)

    if output:
        payload = {"clusters": [c.to_dict() for c in clusters]}
        Path(output).write_text(json.dumps(payload, indent=2, ensure_ascii=False))
        console.print(f"[green]✓ Wrote layout to {output}[/]")


@cli.command()
@click.argument("path")
@click.option("--group", "-g", default=None, help="Group key to inspect (default: first group)")
@click.option("--n", "-n", default=10, help="Number of pairs to show")
@click.pass_context
def similar(ctx, path, group, n):
    """Show the most similar record pairs within one group."""
    from .layout import group_records
    from .text import build_tokenizer, similarity_matrix, vectorize

    config = _get_config(ctx)
    records = _load(path, config)
    if not records:
        if records is not None:
            console.print("[yellow]No records found.[/]")
        return

    groups = group_records(records)
    if group is None:
        key = next(iter(groups))
    else:
        key = next((k for k in groups if str(k) == group), None)
        if key is None:
            console.print(f"[red]Group not found: {group}[/]")
            return

    members = groups[key]
    vectors = vectorize([r.document for r in members], analyzer=build_tokenizer(config))
    sim = similarity_matrix(vectors)
    pairs = sorted(
        ((float(sim[i, j]), members[i], members[j]) for i, j in combinations(range(len(members)), 2)),
        key=lambda p: p[0],
        reverse=True,
    )

    console.print(f"[green]Group {key!r}: {len(members)} record(s)[/]")
    for score, a, b in pairs[:n]:
        console.print(f"  {a.id} ↔ {b.id} (score: {score:.3f})")


if __name__ == "__main__":
    cli()
