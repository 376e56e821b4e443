"""
cvpress command line interface

Commands:
    render    - Render a CV document to an HTML preview page (or PDF)
    print     - Print a CV document to PDF
    export    - Write the stored CV as JSON
    import    - Load a JSON document into the CV store
    templates - List available templates

Examples:\n

    cvpress render cv.json -o preview.html               # Preview with the CV's template

    cvpress render cv.yaml -t sidebar --width 400        # Scaled sidebar preview

    cvpress print cv.json -o cv.pdf                      # PDF via the print surface

    cvpress import cv-data.json && cvpress export        # Round trip through the store
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
import yaml

from cvpress.base import RenderingConfig
from cvpress.config import ConfigStore, get_default_config, load_config
from cvpress.cv_models import TEMPLATES
from cvpress.exceptions import CVImportError
from cvpress.logger import log_info, setup_logger
from cvpress.populate import TemplateRegistry
from cvpress.store import EXPORT_FILENAME, CVStore
from cvpress.tools import ensure_cv_record, mk_cv
from cvpress.util import dump_yaml

app = typer.Typer(
    help="Render CV documents with HTML and LaTeX templates",
    add_completion=False,
    invoke_without_command=True,
)


def _config(ctx: typer.Context) -> ConfigStore:
    return ctx.obj if isinstance(ctx.obj, ConfigStore) else get_default_config()


def _rendering(
    config: ConfigStore,
    fmt: str,
    template: Optional[str],
    width: Optional[float],
    templates_dirs: Optional[list[Path]],
) -> RenderingConfig:
    dirs = [str(d) for d in templates_dirs or []] + list(config['templates_dirs'])
    return RenderingConfig(
        format=fmt,
        template=template,
        available_width=width if width is not None else config['available_width'],
        templates_dirs=dirs,
        print_cleanup_delay=config['print_cleanup_delay'],
    )


def _load_record(source: Path):
    try:
        return ensure_cv_record(source)
    except (OSError, ValueError, yaml.YAMLError, CVImportError) as e:
        typer.secho(f"Error: cannot read {source}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="JSON or YAML configuration file"),
    ] = None,
    log_level: Annotated[
        str, typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ...)")
    ] = "WARNING",
):
    """Show help by default when no command is provided."""
    setup_logger(log_level.upper())
    ctx.obj = load_config(str(config_path)) if config_path else get_default_config()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="CV document (.json, .yaml)")],
    template: Annotated[
        Optional[str], typer.Option("--template", "-t", help="Template id (overrides the CV's)")
    ] = None,
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Output file (default: stdout)")
    ] = None,
    width: Annotated[
        Optional[float], typer.Option("--width", help="Available preview width in pixels", min=1)
    ] = None,
    fmt: Annotated[str, typer.Option("--format", "-f", help="html or pdf")] = "html",
    templates_dir: Annotated[
        Optional[list[Path]],
        typer.Option("--templates-dir", help="Extra template directory (repeatable)"),
    ] = None,
):
    """
    Render a CV document.

    Examples:\n

        $ cvpress render cv.json -o preview.html

        $ cvpress render cv.json -t academic -f pdf -o cv.pdf
    """
    if fmt == 'pdf' and not output:
        typer.secho("Error: PDF output needs --output", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    config = _config(ctx)
    record = _load_record(source)
    rendering = _rendering(config, fmt, template, width, templates_dir)
    try:
        result = mk_cv(record, rendering, output_path=output)
    except NotImplementedError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    if output:
        log_info(f"Wrote {len(result)} bytes to {output}")
        typer.secho(f"Wrote {output}", fg=typer.colors.GREEN)
    else:
        typer.echo(result.decode('utf-8'))


@app.command("print")
def print_command(
    ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="CV document (.json, .yaml)")],
    output: Annotated[Path, typer.Option("--output", "-o", help="PDF file to write")],
    template: Annotated[
        Optional[str], typer.Option("--template", "-t", help="Template id (overrides the CV's)")
    ] = None,
):
    """Print a CV document to PDF."""
    config = _config(ctx)
    record = _load_record(source)
    mk_cv(record, _rendering(config, 'pdf', template, None, None), output_path=output)
    typer.secho(f"Wrote {output}", fg=typer.colors.GREEN)


@app.command("export")
def export_command(
    ctx: typer.Context,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help=f"Output file, e.g. {EXPORT_FILENAME} (default: stdout)"),
    ] = None,
):
    """Write the stored CV as a JSON document (YAML when the output ends in .yaml or .yml)."""
    store = CVStore.from_config(_config(ctx))
    if output and output.suffix in (".yaml", ".yml"):
        dump_yaml(store.data.model_dump(mode="json"), str(output))
        typer.secho(f"Wrote {output}", fg=typer.colors.GREEN)
        return
    text = store.export_json()
    if output:
        output.write_text(text, encoding="utf-8")
        typer.secho(f"Wrote {output}", fg=typer.colors.GREEN)
    else:
        typer.echo(text)


@app.command("import")
def import_command(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="JSON document to load")],
):
    """Load a JSON document into the CV store (the store is untouched on error)."""
    store = CVStore.from_config(_config(ctx))
    try:
        text = file.read_text(encoding='utf-8')
        record = store.load_json(text)
    except (OSError, CVImportError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.secho(f"Imported CV for {record.name or '(unnamed)'}", fg=typer.colors.GREEN)


@app.command("templates")
def templates_command(ctx: typer.Context):
    """List the known templates and where their sources come from."""
    config = _config(ctx)
    registry = TemplateRegistry(templates_dirs=list(config['templates_dirs']))
    known = {info.id for info in TEMPLATES}
    for info in TEMPLATES:
        source = registry.resolve(info.id).path if info.id in registry else 'built-in'
        typer.echo(f"{info.id:<10} {info.family.value:<9} {info.description} [{source}]")
    for template_id in registry:
        if template_id not in known:
            src = registry[template_id]
            typer.echo(f"{template_id:<10} {src.kind:<9} [{src.path}]")


if __name__ == "__main__":
    app()
