"""mdstyle CLI entry point."""
from __future__ import annotations

import json
import logging
from dataclasses import replace

import click

from mdstyle.model import CodeTheme, OutputFormat

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity",
)
def cli(log_level: str) -> None:
    """mdstyle: Markdown to inline-styled HTML for restrictive editors."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _themes_dir(themes_dir: str | None) -> str:
    from mdstyle.config import MdStyleConfig

    return themes_dir or MdStyleConfig.from_env().themes_dir


@cli.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.option("--themes-dir", default=None, help="Theme storage directory")
@click.option("--config", "config_path", default=None, help="JSON file with apiKeys")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(
    host: str | None,
    port: int | None,
    themes_dir: str | None,
    config_path: str | None,
    debug: bool,
) -> None:
    """Start the mdstyle API server."""
    from mdstyle.config import ApiKeyCache, MdStyleConfig
    from mdstyle.web.app import create_app

    overrides = {
        "host": host,
        "port": port,
        "themes_dir": themes_dir,
        "config_path": config_path,
    }
    config = replace(
        MdStyleConfig.from_env(),
        **{k: v for k, v in overrides.items() if v is not None},
    )
    api_keys = ApiKeyCache(config.config_path)
    api_keys.start(config.api_key_refresh_seconds)

    app = create_app(config=config, api_keys=api_keys)
    click.echo(f"Starting mdstyle on {config.host}:{config.port}")
    try:
        app.run(host=config.host, port=config.port, debug=debug, threaded=True)
    finally:
        api_keys.stop()


@cli.command("render")
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--theme-id", default=None, help="Stored theme to apply")
@click.option(
    "--format",
    "output_format",
    default=OutputFormat.WECHAT.value,
    type=click.Choice([f.value for f in OutputFormat]),
    help="Output shape",
)
@click.option("--mac-code-block", is_flag=True, help="Decorate code blocks with a Mac header")
@click.option(
    "--code-theme",
    default=CodeTheme.GITHUB_DARK.value,
    type=click.Choice([t.value for t in CodeTheme]),
    help="Syntax highlight palette",
)
@click.option("--themes-dir", default=None, help="Theme storage directory")
@click.option("-o", "--output", type=click.File("w", encoding="utf-8"), default="-")
@click.option(
    "--css-output",
    type=click.File("w", encoding="utf-8"),
    default=None,
    help="Where to write the stylesheet (html-plain only)",
)
def render_cmd(
    source,
    theme_id: str | None,
    output_format: str,
    mac_code_block: bool,
    code_theme: str,
    themes_dir: str | None,
    output,
    css_output,
) -> None:
    """Render a Markdown file (or - for stdin) locally."""
    from mdstyle.model import RenderOptions
    from mdstyle.renderer import render
    from mdstyle.store.themes import ThemeStore

    if output_format == OutputFormat.HTML_PLAIN and css_output is None:
        raise click.UsageError("--css-output is required with --format html-plain")

    options = RenderOptions(is_mac_code_block=mac_code_block, code_theme=CodeTheme(code_theme))
    result = render(
        source.read(),
        theme_id=theme_id,
        output_format=output_format,
        options=options,
        store=ThemeStore(_themes_dir(themes_dir)),
    )
    output.write(result.html)
    output.write("\n")
    if result.css is not None:
        css_output.write(result.css)

    rt = result.reading_time
    click.echo(f"{rt.chars} chars, {rt.words} words, ~{rt.minutes} min read", err=True)


# ---------------------------------------------------------------------------
# Local theme management
# ---------------------------------------------------------------------------


@cli.group()
@click.option("--themes-dir", default=None, help="Theme storage directory")
@click.pass_context
def themes(ctx: click.Context, themes_dir: str | None) -> None:
    """Manage themes in a local theme directory."""
    from mdstyle.store.themes import ThemeStore

    ctx.obj = ThemeStore(_themes_dir(themes_dir))


@themes.command("list")
@click.pass_obj
def themes_list(store) -> None:
    """List stored themes, newest first."""
    records = store.list_all()
    if not records:
        click.echo("No themes stored")
        return
    for record in records:
        click.echo(f"{record.id}\t{record.name}\t{record.created_at}")


@themes.command("add")
@click.argument("css_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--name", default=None, help="Theme name (defaults to the file name)")
@click.pass_obj
def themes_add(store, css_file: str, name: str | None) -> None:
    """Store a CSS file as a new theme."""
    from pathlib import Path

    from mdstyle.errors import InvalidThemeError

    path = Path(css_file)
    try:
        record = store.save(name or path.stem, path.read_text(encoding="utf-8"))
    except InvalidThemeError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Theme stored: {record.id}")


@themes.command("export")
@click.argument("theme_id")
@click.option("-o", "--output", type=click.File("w", encoding="utf-8"), default="-")
@click.pass_obj
def themes_export(store, theme_id: str, output) -> None:
    """Write a theme's CSS to a file or stdout."""
    theme = store.get(theme_id)
    if theme is None:
        raise click.ClickException(f"Theme not found: {theme_id}")
    output.write(theme.css)


@themes.command("delete")
@click.argument("theme_id")
@click.pass_obj
def themes_delete(store, theme_id: str) -> None:
    """Delete a stored theme."""
    if not store.delete(theme_id):
        raise click.ClickException(f"Theme not found: {theme_id}")
    click.echo(f"Theme deleted: {theme_id}")


# ---------------------------------------------------------------------------
# Remote server
# ---------------------------------------------------------------------------


@cli.group()
@click.option("--endpoint", envvar="MDSTYLE_ENDPOINT", required=True, help="Server base URL")
@click.option("--api-key", envvar="MDSTYLE_API_KEY", required=True, help="API key")
@click.pass_context
def remote(ctx: click.Context, endpoint: str, api_key: str) -> None:
    """Talk to a running mdstyle server."""
    from mdstyle.client import ApiClient

    ctx.obj = ctx.with_resource(ApiClient(endpoint, api_key))


@remote.command("health")
@click.pass_obj
def remote_health(client) -> None:
    """Check that the server is up."""
    if not client.health():
        raise click.ClickException("Server is not healthy")
    click.echo("ok")


@remote.command("render")
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--theme-id", default=None, help="Stored theme to apply")
@click.option(
    "--format",
    "output_format",
    default=OutputFormat.WECHAT.value,
    type=click.Choice([f.value for f in OutputFormat]),
)
@click.option("--mac-code-block", is_flag=True)
@click.option(
    "--code-theme",
    default=CodeTheme.GITHUB_DARK.value,
    type=click.Choice([t.value for t in CodeTheme]),
    help="Syntax highlight palette",
)
@click.pass_obj
def remote_render(
    client,
    source,
    theme_id: str | None,
    output_format: str,
    mac_code_block: bool,
    code_theme: str,
) -> None:
    """Render a Markdown file on the server and print the JSON result."""
    from mdstyle.errors import MdStyleError
    from mdstyle.model import RenderOptions

    options = RenderOptions(is_mac_code_block=mac_code_block, code_theme=CodeTheme(code_theme))
    try:
        data = client.render(
            source.read(),
            theme_id=theme_id,
            output_format=output_format,
            options=options,
        )
    except MdStyleError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(json.dumps(data, ensure_ascii=False, indent=2))


@remote.command("themes")
@click.pass_obj
def remote_themes(client) -> None:
    """List the server's themes."""
    from mdstyle.errors import MdStyleError

    try:
        records = client.list_themes()
    except MdStyleError as exc:
        raise click.ClickException(str(exc)) from exc
    for record in records:
        click.echo(f"{record['id']}\t{record['name']}\t{record.get('createdAt', '')}")
