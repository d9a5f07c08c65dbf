"""Inventory sources: one fetch plus one parse each."""

from __future__ import annotations

import structlog

from ..config import CherryPickedConfig, LKQConfig
from ..errors import DecodeError
from ..models import Vehicle
from .fetcher import FetchRequest, Fetcher
from .parser import Parser


class CherryPickedSource:
    """JSON inventory from Cherry Picked Auto Parts, filtered to one make."""

    name = "cherry_picked"

    def __init__(
        self,
        config: CherryPickedConfig,
        make: str,
        parser: Parser | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.config = config
        self.make = make
        self.parser = parser or Parser()
        self.logger = logger or structlog.get_logger("salvage_watch.sources")

    def fetch(self, fetcher: Fetcher) -> tuple[Vehicle, ...]:
        response = fetcher.fetch(FetchRequest(url=self.config.url), stage=self.name)
        try:
            vehicles = self.parser.parse_cherry_picked(
                response.text, self.make, self.config.site_name
            )
        except DecodeError as exc:
            exc.stage = self.name
            raise
        self.logger.info("source_fetched", source=self.name, vehicles=len(vehicles))
        return tuple(vehicles)


class LKQSource:
    """HTML inventory fragment from LKQ Pick Your Part."""

    name = "lkq"

    def __init__(
        self,
        config: LKQConfig,
        make: str,
        parser: Parser | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.config = config
        self.make = make
        self.parser = parser or Parser()
        self.logger = logger or structlog.get_logger("salvage_watch.sources")

    def build_request(self) -> FetchRequest:
        return FetchRequest(
            url=self.config.url,
            params=self.config.query_params(self.make),
            headers={"referer": self.config.referer},
        )

    def fetch(self, fetcher: Fetcher) -> tuple[Vehicle, ...]:
        response = fetcher.fetch(self.build_request(), stage=self.name)
        try:
            vehicles = self.parser.parse_lkq(response.text, self.config.site_name)
        except DecodeError as exc:
            exc.stage = self.name
            raise
        self.logger.info("source_fetched", source=self.name, vehicles=len(vehicles))
        return tuple(vehicles)


__all__ = ["CherryPickedSource", "LKQSource"]
