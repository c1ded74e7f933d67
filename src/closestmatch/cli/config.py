"""Configuration CLI commands."""

from __future__ import annotations

from typing import Annotated

import typer

from closestmatch.cli.context import CLIContext
from closestmatch.cli.formatters import (
    print_config,
    print_did_you_mean,
    print_error,
    print_info,
    print_success,
)
from closestmatch.infrastructure.config import (
    CONFIG_KEYS,
    ConfigError,
    load_global_config,
    save_global_config,
    update_config,
)
from closestmatch.infrastructure.paths import PathResolver
from closestmatch.modules.matching import closest_match

app = typer.Typer(
    name="config",
    help="Show and change default settings.",
    no_args_is_help=True,
)

# Shared resolver instance
_resolver = PathResolver()


@app.command("show")
def show() -> None:
    """Show the current configuration.

    \b
    Examples:
        closestmatch config show
    """
    config = load_global_config(_resolver)
    print_config(config, str(_resolver.global_config()))


@app.command("set")
def set_value(
    key: Annotated[
        str,
        typer.Argument(help=f"Setting to change ({', '.join(CONFIG_KEYS)})"),
    ],
    value: Annotated[str, typer.Argument(help="true or false")],
) -> None:
    """Change a default setting.

    \b
    Examples:
        closestmatch config set show-all true   # find returns all ties
        closestmatch config set fold yes        # ignore accents and case
    """
    if key not in CONFIG_KEYS:
        print_error(f"Unknown config key: {key}")
        suggestion = closest_match(key, list(CONFIG_KEYS))
        if suggestion is not None:
            print_did_you_mean([suggestion])
        raise typer.Exit(1)

    try:
        config = update_config(load_global_config(_resolver), key, value)
        save_global_config(config, _resolver)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    CLIContext.get().config = config
    print_success(f"Set {key} = {str(getattr(config, CONFIG_KEYS[key])).lower()}")
    print_info(f"Saved to {_resolver.global_config()}")
