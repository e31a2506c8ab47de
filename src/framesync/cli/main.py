"""
framesync CLI.

Offline entry points around the two engines:
- layout: generate a runtime hierarchy from an exported design document
- merge: reconcile a previously generated artifact into a regenerated one
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from framesync._version import get_version
from framesync.core.artifacts import load_artifact, load_design, save_artifact
from framesync.core.errors import FramesyncError
from framesync.core.ir import RuntimeObject
from framesync.core.manifest import find_manifest
from framesync.reconcile import RegenerationSession
from framesync.ui.layout_engine import apply_layout_tree, default_object_factory

app = typer.Typer(
    help="framesync – design-to-runtime UI bridge",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"framesync {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """framesync CLI main callback for global options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def format_tree(obj: RuntimeObject, indent: int = 0) -> list[str]:
    """Render a hierarchy as indented lines: ``name [Kind, Kind]``."""
    kinds = ", ".join(component.kind for component in obj.components)
    lines = [f"{'  ' * indent}{obj.name} [{kinds}]"]
    for child in obj.children:
        lines.extend(format_tree(child, indent + 1))
    return lines


@app.command()
def layout(
    design: Path = typer.Argument(..., help="Design document (JSON)"),  # noqa: B008
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory holding framesync.toml",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the generated hierarchy as an artifact",
    ),
) -> None:
    """Generate a runtime hierarchy from a design document."""
    try:
        manifest = find_manifest(project_dir)
        node = load_design(design)
        root = default_object_factory(node)
        apply_layout_tree(node, root, manifest.import_settings)
    except (FramesyncError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output is not None:
        save_artifact(root, output)
        typer.echo(f"Wrote {output}")
    else:
        typer.echo("\n".join(format_tree(root)))


@app.command()
def merge(
    old: Path = typer.Argument(..., help="Artifact generated by the previous run"),  # noqa: B008
    new: Path = typer.Argument(..., help="Freshly regenerated artifact"),  # noqa: B008
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory holding framesync.toml",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Where to write the merged artifact (default: overwrite NEW)",
    ),
) -> None:
    """Carry customizations from OLD into NEW."""
    try:
        manifest = find_manifest(project_dir)
        with RegenerationSession(settings=manifest.reconcile) as session:
            session.before_regeneration(old)
            new_root = load_artifact(new)
            report = session.after_regeneration(new_root)
    except (FramesyncError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if report is None:
        typer.echo(f"No snapshot matched root {new_root.name}", err=True)
        raise typer.Exit(code=1)

    destination = output or new
    save_artifact(new_root, destination)
    for key, value in report.summary().items():
        typer.echo(f"{key}: {value}")
    for issue in report.issues:
        typer.echo(f"  {issue.format()}")
    typer.echo(f"Wrote {destination}")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main()
