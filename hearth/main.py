"""
Command-line interface for inspecting and configuring hearth applications.
"""

import sys
from typing import Optional

import typer

from .application.app import Application
from .infrastructure.config.loader import ConfigLoader
from .infrastructure.config.models import LoggingConfig, default_config
from .infrastructure.logging.setup import LoggingManager

cli = typer.Typer(
    name="hearth",
    help="Minimal application bootstrap: container, providers and lifecycle"
)


@cli.command()
def init_config(
    output: str = typer.Option(
        "config.yaml", "--output", "-o", help="Output configuration file"
    ),
    format: str = typer.Option(
        "yaml", "--format", "-f", help="Configuration format (yaml/json)"
    )
) -> None:
    """Generate a default configuration file."""

    config_loader = ConfigLoader()

    try:
        config_loader.save_config(default_config(), output, format)
        typer.echo(f"Default configuration saved to {output}")
    except Exception as e:
        typer.echo(f"Error saving configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
def validate_config(
    config_file: str = typer.Argument(...,
                                      help="Configuration file to validate")
) -> None:
    """Validate a configuration file."""

    config_loader = ConfigLoader()

    try:
        config = config_loader.load_config(config_file)
        LoggingConfig.from_dict(config.get('logging', {}))
        typer.echo(f"Configuration file {config_file} is valid")
        typer.echo(f"Environment: {config.get('environment', 'production')}")
    except Exception as e:
        typer.echo(f"Configuration validation failed: {e}", err=True)
        sys.exit(1)


@cli.command()
def info(
    config_file: Optional[str] = typer.Option(
        None, "--config", "-c", help="Configuration file path"
    ),
    environment: Optional[str] = typer.Option(
        None, "--env", "-e", help="Environment label"
    )
) -> None:
    """Boot an application and print its providers and bindings."""

    try:
        config = ConfigLoader().load_config(config_file)
        app = Application(
            config, environment or config.get('environment', 'production'))
        app.boot()

        # Booting only configures logging when the config has a section for it
        logging_manager = app.get(LoggingManager)
        if not logging_manager.is_configured:
            logging_manager.configure()
        logging_manager.get_logger(__name__).debug(f"Booted {len(app.providers)} providers")
    except Exception as e:
        typer.echo(f"Application failed to boot: {e}", err=True)
        sys.exit(1)

    summary = app.describe()
    typer.echo(f"Environment: {summary['environment']}")
    typer.echo(f"CLI mode: {summary['cli']}")
    typer.echo("Providers:")
    for name in summary['providers']:
        typer.echo(f"  {name}")
    typer.echo("Bindings:")
    for name in summary['bindings']:
        typer.echo(f"  {name}")
    typer.echo("Aliases:")
    for alias, target in sorted(summary['aliases'].items()):
        typer.echo(f"  {alias} -> {target}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
