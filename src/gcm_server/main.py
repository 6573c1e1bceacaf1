from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

from gcm_server.config import AppConfig, ConfigError, load_config
from gcm_server.message import MessageBuilder, to_json
from gcm_server.observability import configure_logging, get_logger

logger = get_logger(__name__)

app = typer.Typer(add_completion=False)


def _parse_data_items(items: list[str]) -> dict[str, str]:
    data: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            msg = f"expected KEY=VALUE, got {item!r}"
            raise typer.BadParameter(msg, param_hint="--data")
        data[key] = value
    return data


def _load(config_path: Path | None) -> AppConfig:
    if config_path is None:
        return AppConfig()
    return load_config(config_path)


@app.callback()
def main() -> None:
    """Build and inspect relay push messages."""


@app.command()
def preview(  # noqa: PLR0913
    config: Annotated[Path | None, typer.Option("-c", "--config")] = None,
    collapse_key: Annotated[str | None, typer.Option("--collapse-key")] = None,
    ttl: Annotated[int | None, typer.Option("--ttl")] = None,
    delay_while_idle: Annotated[bool | None, typer.Option("--delay-while-idle/--no-delay-while-idle")] = None,
    dry_run: Annotated[bool | None, typer.Option("--dry-run/--no-dry-run")] = None,
    high_priority: Annotated[bool | None, typer.Option("--high-priority/--no-high-priority")] = None,
    data: Annotated[list[str] | None, typer.Option("--data")] = None,
    as_json: Annotated[bool, typer.Option("--json")] = False,
) -> None:
    """Print a message built from config defaults and command-line options."""
    configure_logging()
    payload = _parse_data_items(data or [])
    try:
        app_config = _load(config)
    except ConfigError as exc:
        logger.error("config_load_failed", path=str(config), error=str(exc))
        raise typer.Exit(code=1) from exc

    builder = MessageBuilder.from_defaults(app_config.message)
    if collapse_key is not None:
        builder.collapse_key(collapse_key)
    if ttl is not None:
        builder.time_to_live(ttl)
    if delay_while_idle is not None:
        builder.delay_while_idle(delay_while_idle)
    if dry_run is not None:
        builder.dry_run(dry_run)
    if high_priority is not None:
        builder.high_priority(high_priority)
    for key, value in payload.items():
        builder.add_data(key, value)

    message = builder.build()
    typer.echo(to_json(message) if as_json else str(message))


if __name__ == "__main__":
    app()
