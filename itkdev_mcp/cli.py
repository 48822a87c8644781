"""ITK Dev Docker MCP CLI."""

import json
import sys

import click
from rich.console import Console
from rich.markup import escape

from .errors import ItkDevError

console = Console()


def _fail(error: Exception) -> None:
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    sys.exit(1)


def _print_json(data: dict) -> None:
    console.print_json(json.dumps(data))


@click.group()
@click.option("--templates-dir", type=click.Path(file_okay=False), default=None,
              help="Templates directory (default: ITKDEV_TEMPLATES_DIR or <repo>/templates)")
@click.pass_context
def main(ctx, templates_dir):
    """ITK Dev Docker MCP server and project tools."""
    ctx.ensure_object(dict)
    ctx.obj["templates_dir"] = templates_dir


@main.command()
def version():
    """Show version."""
    from . import __version__
    console.print(f"itkdev-docker-mcp v{__version__}")


@main.command()
@click.option("--docs-dir", type=click.Path(file_okay=False), default=None,
              help="Documentation directory (default: ITKDEV_DOCS_DIR or <repo>/docs)")
@click.pass_context
def serve(ctx, docs_dir):
    """Run the MCP server on stdio."""
    from .config import Config
    from .server import create_server

    templates_dir = ctx.obj["templates_dir"]
    if not templates_dir and not docs_dir:
        try:
            Config.validate()
        except ValueError as e:
            _fail(e)

    create_server(templates_dir, docs_dir).run()


@main.command()
@click.pass_context
def templates(ctx):
    """List available templates."""
    from .tools.template_tools import list_templates

    click.echo(list_templates(ctx.obj["templates_dir"]))


@main.command()
@click.argument("path")
def detect(path: str):
    """Detect the ITK Dev setup of a project directory."""
    from .tools.project_tools import detect_project

    try:
        _print_json(detect_project(path))
    except ItkDevError as e:
        _fail(e)


@main.command()
@click.argument("path")
@click.option("--template", "-t", default=None,
              help="Template to compare against (default: ITKDEV_TEMPLATE from .env)")
@click.pass_context
def compare(ctx, path: str, template: str):
    """Compare a project's key files with its template."""
    from .tools.project_tools import compare_project

    try:
        result = compare_project(path, template, ctx.obj["templates_dir"])
    except ItkDevError as e:
        _fail(e)

    _print_json(result)
    if result["summary"]["upToDate"]:
        console.print("[green]Project is up to date with its template[/green]")
    else:
        console.print(f"[yellow]{result['recommendation']}[/yellow]")


@main.command()
@click.argument("template")
@click.pass_context
def files(ctx, template: str):
    """List the files a template installs."""
    from .tools.template_tools import get_template_files

    try:
        _print_json(get_template_files(template, ctx.obj["templates_dir"]))
    except ItkDevError as e:
        _fail(e)


@main.command()
@click.argument("template")
@click.argument("file")
@click.pass_context
def show(ctx, template: str, file: str):
    """Print one file from a template."""
    from .tools.template_tools import get_template_content

    try:
        click.echo(get_template_content(template, file, ctx.obj["templates_dir"]), nl=False)
    except ItkDevError as e:
        _fail(e)


@main.command()
@click.argument("key")
@click.option("--docs-dir", type=click.Path(file_okay=False), default=None,
              help="Documentation directory (default: ITKDEV_DOCS_DIR or <repo>/docs)")
def docs(key: str, docs_dir):
    """Print a documentation resource (cli, compose, taskfile)."""
    from .resources.documentation import read_doc

    try:
        click.echo(read_doc(key, docs_dir), nl=False)
    except ItkDevError as e:
        _fail(e)


if __name__ == "__main__":
    main()
