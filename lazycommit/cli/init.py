"""CLI command for storing the OpenAI API key."""

import typer

from lazycommit import global_config


def init_config() -> None:
    """Save your OpenAI API key to ~/.lazycommit.yaml."""
    try:
        config_file = global_config.get_config_file_path()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error saving configuration: {e}", err=True)
        raise typer.Exit(1)

    # Check if already configured
    if global_config.is_configured():
        overwrite = typer.confirm(
            f"Configuration already exists at {config_file}. Overwrite the API key?",
            default=False,
        )
        if not overwrite:
            typer.echo("Keeping existing configuration.")
            raise typer.Exit(0)

    api_key = typer.prompt("Enter your OpenAI API key", hide_input=True).strip()
    if not api_key:
        typer.echo("No API key entered. Aborting.", err=True)
        raise typer.Exit(1)

    try:
        global_config.save_api_key(api_key)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error saving configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ API key saved to {config_file}")
    typer.echo("You can now run 'lazycommit commit' in any git repository!")
