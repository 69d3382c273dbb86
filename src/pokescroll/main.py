from pathlib import Path

import click

from pokescroll.config import (
    ALLOWED_THEMES,
    CONFIG_FILE_PATH,
    PokescrollConfig,
    load_config,
    merge_config_with_cli_args,
    save_config,
)
from pokescroll.exceptions import ConfigError
from pokescroll.log import setup_logging


def _load_merged_config(config_path: str | None, **cli_args) -> PokescrollConfig:
    try:
        return merge_config_with_cli_args(load_config(config_path), **cli_args)
    except ConfigError as e:
        raise click.UsageError(str(e))


@click.group(invoke_without_command=True)
@click.pass_context
@click.option(
    "--api-url",
    type=str,
    help="Base URL of the catalog proxy (default: http://127.0.0.1:8000)",
    default=None,
    envvar="POKESCROLL_API_URL",
)
@click.option(
    "--page-size",
    type=click.IntRange(min=1),
    help="Number of items requested per page",
    default=None,
)
@click.option(
    "--theme",
    type=click.Choice(ALLOWED_THEMES, case_sensitive=False),
    help="Theme to use for the UI",
    default=None,
)
@click.option(
    "--config",
    type=click.Path(exists=True, readable=True, path_type=str),
    help="Path to configuration file (default: ~/.pokescroll.config)",
    default=None,
)
def cli(
    ctx,
    api_url: str | None = None,
    page_size: int | None = None,
    theme: str | None = None,
    config: str | None = None,
):
    """Pokescroll - Browse the Pokémon catalog from your terminal."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    if ctx.invoked_subcommand is None:
        main(api_url, page_size, theme.lower() if theme else None, config)


def main(
    api_url: str | None = None,
    page_size: int | None = None,
    theme: str | None = None,
    config_file: str | None = None,
):
    """Run the terminal browser."""
    from pokescroll.ui.app import PokescrollApp

    config = _load_merged_config(config_file, api_base_url=api_url, page_size=page_size, theme=theme)
    setup_logging(config.log_file, config.log_level)
    app = PokescrollApp(config=config)
    app.run()


@cli.command()
@click.option("--host", type=str, default="127.0.0.1", show_default=True, help="Interface to bind")
@click.option("--port", type=int, default=8000, show_default=True, help="Port to listen on")
@click.option("--upstream-url", type=str, default=None, help="PokéAPI base URL (default: https://pokeapi.co/api/v2)")
@click.pass_context
def serve(ctx, host: str, port: int, upstream_url: str | None = None):
    """Run the catalog proxy the browser reads from."""
    import uvicorn

    from pokescroll.server import create_app

    config = _load_merged_config(ctx.obj.get("config_path"), upstream_url=upstream_url)
    setup_logging(config.log_file, config.log_level, to_stderr=True)
    app = create_app(config.upstream_url, timeout=config.request_timeout)
    uvicorn.run(app, host=host, port=port)


@cli.command()
@click.option(
    "--config",
    type=click.Path(path_type=str),
    help="Path to configuration file (default: ~/.pokescroll.config)",
    default=None,
)
def configure(config: str | None = None):
    """Interactive configuration setup for Pokescroll"""
    config_path = CONFIG_FILE_PATH
    if config:
        config_path = Path(config)

    click.echo("Pokescroll Configuration Setup")
    click.echo("=" * 30)
    click.echo("Leave fields empty to keep the current value or use the default.")
    click.echo()

    existing_config = {}
    if config_path.exists():
        try:
            existing_config = vars(load_config(str(config_path)))
            click.echo(f"Found existing configuration at {config_path}")
            click.echo()
        except ConfigError as e:
            click.echo(f"Ignoring unreadable configuration: {e}")

    defaults = vars(PokescrollConfig())
    current = {**defaults, **existing_config}
    new_config = {}

    click.echo("Catalog:")
    click.echo("-" * 8)
    new_config["api_base_url"] = click.prompt("Catalog proxy URL", default=current["api_base_url"], type=str).strip()
    new_config["page_size"] = click.prompt("Items per page", default=current["page_size"], type=click.IntRange(min=1))
    new_config["stop_on_empty_page"] = click.confirm(
        "Stop requesting pages after an empty one?", default=current["stop_on_empty_page"]
    )

    click.echo()
    click.echo("Display:")
    click.echo("-" * 8)
    click.echo("Available themes:")
    for i, theme in enumerate(ALLOWED_THEMES, 1):
        marker = " (current)" if theme == current["theme"] else ""
        click.echo(f"  {i}. {theme}{marker}")

    theme_choice = click.prompt(
        f"Select theme (1-{len(ALLOWED_THEMES)})",
        default=ALLOWED_THEMES.index(current["theme"]) + 1 if current["theme"] in ALLOWED_THEMES else 1,
        type=click.IntRange(1, len(ALLOWED_THEMES)),
    )
    new_config["theme"] = ALLOWED_THEMES[theme_choice - 1]
    new_config["carousel_interval"] = click.prompt(
        "Banner rotation interval (seconds)", default=current["carousel_interval"], type=float
    )
    new_config["carousel_reset_on_navigate"] = click.confirm(
        "Restart banner rotation after manual navigation?", default=current["carousel_reset_on_navigate"]
    )

    # Validate configuration
    click.echo()
    try:
        PokescrollConfig(**{**current, **new_config})
        click.echo("✓ Configuration validated successfully!")
    except ConfigError as e:
        click.echo(f"✗ Configuration validation failed: {e}")
        if not click.confirm("Save configuration anyway?"):
            click.echo("Configuration cancelled.")
            return

    # Keep settings that are not prompted for (log file, timeouts...)
    to_save = {key: value for key, value in {**existing_config, **new_config}.items() if value is not None}
    save_config(to_save, config_path)
    click.echo(f"Configuration saved to {config_path}")


if __name__ == "__main__":
    cli()
