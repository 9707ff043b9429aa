"""viewcull CLI.

Command-line interface for culling a document snapshot against a stage
and camera, mainly for inspecting what the renderer would receive.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from viewcull import __version__
from viewcull.core import ViewportCuller, filter_project_by_page
from viewcull.document import DocumentLoadError, Project, dump_project, load_project
from viewcull.utils.logging import configure_logging, get_logger, set_render_context

app = typer.Typer(
    name="viewcull",
    help="viewcull: viewport culling for paginated vector sketches",
    add_completion=False,
)


# =============================================================================
# Commands
# =============================================================================


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show version information."""
    if json_output:
        typer.echo(json.dumps({"version": __version__}))
    else:
        typer.echo(f"viewcull {__version__}")


@app.command()
def cull(  # noqa: PLR0913
    project_path: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to a JSON document snapshot",
        ),
    ],
    width: Annotated[
        float, typer.Option("--width", "-W", min=0, help="Stage width in pixels")
    ],
    height: Annotated[
        float, typer.Option("--height", "-H", min=0, help="Stage height in pixels")
    ],
    margin: Annotated[
        float | None,
        typer.Option("--margin", min=0, help="Screen margin in pixels (default 200)"),
    ] = None,
    page: Annotated[
        int | None,
        typer.Option("--page", "-p", min=1, help="Override the current page"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the culled snapshot to JSON"),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)"
        ),
    ] = 0,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Cull a snapshot against a stage and report what stays visible."""
    _configure_logging(verbose)
    logger = get_logger(__name__)

    try:
        project = load_project(project_path)
    except DocumentLoadError as e:
        logger.error("Snapshot load failed", path=str(project_path), error=e.message)
        _fail(str(e), json_output)

    if page is not None:
        project = project.model_copy(
            update={"view": project.view.model_copy(update={"current_page": page})}
        )

    set_render_context(document_id=project.document_id, page=project.view.current_page)
    culler = ViewportCuller(margin_px=margin)
    visible = culler.visible_project(project, width, height)

    if output is not None:
        try:
            output.write_text(dump_project(visible), encoding="utf-8")
        except OSError as e:
            logger.error("Snapshot write failed", path=str(output), error=str(e))
            _fail(
                f"Cannot write snapshot: {e.strerror or e} (path: {output})",
                json_output,
            )
        logger.info("Culled snapshot saved", path=str(output))

    on_page = filter_project_by_page(project, project.view.current_page)
    summary = _summarize(on_page, visible)
    if json_output:
        payload = {
            "page": project.view.current_page,
            "viewport": list(culler.viewport(project, width, height).to_tuple()),
            "collections": summary,
        }
        typer.echo(json.dumps(payload, indent=2))
    else:
        typer.echo(f"Page {project.view.current_page}")
        for name, counts in summary.items():
            typer.echo(f"  {name:<24} {counts['kept']:>6} / {counts['total']}")


# =============================================================================
# Helpers
# =============================================================================


def _summarize(on_page: Project, visible: Project) -> dict[str, dict[str, int]]:
    totals = on_page.collection_sizes()
    kept = visible.collection_sizes()
    return {name: {"kept": kept[name], "total": totals[name]} for name in totals}


def _fail(message: str, json_output: bool) -> NoReturn:
    if json_output:
        typer.echo(json.dumps({"error": message}))
    else:
        typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


def _configure_logging(verbose: int) -> None:
    """Configure logging based on verbosity level."""
    if verbose == 0:
        level = "WARNING"
    elif verbose == 1:
        level = "INFO"
    else:  # verbose >= 2
        level = "DEBUG"

    configure_logging(level=level)


if __name__ == "__main__":
    app()
