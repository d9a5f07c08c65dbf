"""Typer CLI entrypoint for salvage-watch."""

from __future__ import annotations

import structlog
import typer

from .config import ConfigLocator, load_settings
from .errors import ConfigError, WatchError
from .logging_conf import configure_logging
from .orchestrator import Orchestrator

app = typer.Typer(
    help="Watch salvage-yard inventories and mail newly listed vehicles.",
    add_completion=False,
    rich_markup_mode=None,
)


def build_orchestrator() -> Orchestrator:
    locator = ConfigLocator()
    try:
        configure_logging(locator.logs_dir)
    except OSError as exc:
        raise ConfigError(
            f"unable to set up logging in {locator.logs_dir}: {exc}", stage="config"
        ) from exc
    settings = load_settings(locator)
    return Orchestrator(settings, locator)


@app.command()
def main() -> None:
    """Fetch, dedup, notify and persist once."""

    logger = structlog.get_logger("salvage_watch.app")
    try:
        build_orchestrator().run()
    except WatchError as exc:
        logger.error("run_failed", error=str(exc), kind=exc.kind, stage=exc.stage)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "build_orchestrator", "main"]
