"""CLI for browsing a dendron-style vault."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from dendron_tree.config import resolve_vault_directory
from dendron_tree.core.tree.outline import render_outline
from dendron_tree.exceptions import InvalidVaultRootError
from dendron_tree.logging_config import configure_logging
from dendron_tree.vault import DendronVault

app = typer.Typer(help="Dendron tree: browse dotted markdown notes as a hierarchy.")

VaultOption = Annotated[
    Path | None,
    typer.Option("--vault", "-V", help="Vault directory (defaults to $DENDRON_VAULT)"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _open_vault(vault_dir: Path | None) -> DendronVault:
    """Load the vault, exiting if its root is unusable."""
    vault = DendronVault(vault_dir or resolve_vault_directory())
    try:
        vault.init()
    except InvalidVaultRootError as exc:
        logger.error("{}", exc)
        raise typer.Exit(1) from exc
    return vault


@app.command()
def outline(
    vault_dir: VaultOption = None,
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-m", help="Max depth levels to render"),
    ] = None,
) -> None:
    """Print the note hierarchy as a markdown outline."""
    vault = _open_vault(vault_dir)
    md = render_outline(vault.tree, max_depth=max_depth)
    if md:
        typer.echo(md, nl=False)
    else:
        typer.echo(f"No notes in {vault.formatted_path}.")


@app.command(name="list")
def list_cmd(
    vault_dir: VaultOption = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List every note path with its title."""
    vault = _open_vault(vault_dir)
    notes = vault.tree.flatten()[1:]

    if output_json:
        data = [
            {
                "path": note.get_path(),
                "title": note.title,
                "file": str(note.file) if note.file else None,
                "children": note.child_count,
            }
            for note in notes
        ]
        typer.echo(json.dumps(data, indent=2))
        return

    for note in notes:
        marker = " " if note.has_file else "~"
        typer.echo(f"{marker} {note.get_path()}  {note.title}")


@app.command()
def show(
    name: str = typer.Argument(..., help="Dotted note name"),
    vault_dir: VaultOption = None,
) -> None:
    """Show a single note and its direct children."""
    vault = _open_vault(vault_dir)
    note = vault.get_note(name)
    if note is None:
        typer.echo(f"Note '{name}' not found.")
        raise typer.Exit(1)

    typer.echo(f"path:     {note.get_path()}")
    typer.echo(f"title:    {note.title}")
    typer.echo(f"file:     {note.file if note.file else '(none)'}")
    typer.echo(f"children: {note.child_count}")
    for child in note.children:
        typer.echo(f"  - {child.get_path()}  {child.title}")


@app.command()
def new(
    name: str = typer.Argument(..., help="Dotted note name"),
    vault_dir: VaultOption = None,
) -> None:
    """Create a new note from the default template."""
    vault = DendronVault(vault_dir or resolve_vault_directory())
    vault.create_root_folder()
    try:
        path = vault.create_note(name)
    except FileExistsError as exc:
        logger.error("{}", exc)
        raise typer.Exit(1) from exc
    typer.echo(f"Created {path}")
