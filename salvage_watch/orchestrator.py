"""Run orchestrator wiring together fetching, dedup, notification and persistence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import structlog

from .config import ConfigLocator, Settings
from .engine import (
    CherryPickedSource,
    DeduplicationStore,
    Fetcher,
    LKQSource,
    Notifier,
    Parser,
)
from .infra import VehicleStateFile
from .models import Vehicle


@dataclass(frozen=True, slots=True)
class RunSummary:
    fetched: int
    new: tuple[Vehicle, ...]
    notified: bool
    saved: bool


class Orchestrator:
    """Sequential pipeline: sources in order, then dedup, notify, save.

    Every stage raises its own ``WatchError`` subclass; nothing here catches
    them, so the first failure ends the run with the state file untouched.
    """

    def __init__(
        self,
        settings: Settings,
        locator: ConfigLocator,
        *,
        sources: Sequence[CherryPickedSource | LKQSource] | None = None,
        store: DeduplicationStore | None = None,
        notifier: Notifier | None = None,
        fetcher: Fetcher | None = None,
    ) -> None:
        self.settings = settings
        self.locator = locator
        self.logger = structlog.get_logger("salvage_watch.orchestrator")
        parser = Parser()
        self.sources = list(
            sources
            if sources is not None
            else (
                CherryPickedSource(settings.cherry_picked, settings.target_make, parser),
                LKQSource(settings.lkq, settings.target_make, parser),
            )
        )
        self.store = store or DeduplicationStore(
            VehicleStateFile(locator.state_path(settings))
        )
        self.notifier = notifier or Notifier(settings.mail)
        self._fetcher = fetcher

    def fetch_all(self) -> tuple[Vehicle, ...]:
        fetcher = self._fetcher or Fetcher(timeout=self.settings.http_timeout)
        candidates: list[Vehicle] = []
        try:
            for source in self.sources:
                candidates.extend(source.fetch(fetcher))
        finally:
            if self._fetcher is None:
                fetcher.close()
        return tuple(candidates)

    def run(self) -> RunSummary:
        candidates = self.fetch_all()
        existing = self.store.load()
        result = self.store.filter_new(candidates, existing)
        self.logger.info(
            "dedup_complete",
            fetched=len(candidates),
            existing=len(existing),
            new=len(result.new),
        )
        if not result.has_new:
            return RunSummary(fetched=len(candidates), new=(), notified=False, saved=False)

        # A failed send aborts here, so the same vehicles are reported again
        # next run.
        self.notifier.send(result.new)
        self.store.save(result.appended)
        self.logger.info("state_saved", vehicles=len(result.appended))
        return RunSummary(fetched=len(candidates), new=result.new, notified=True, saved=True)


__all__ = ["Orchestrator", "RunSummary"]
