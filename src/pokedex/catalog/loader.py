"""Batch loading of catalog entries and the state it publishes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Optional, Tuple, Union

import httpx

from ..api.client import fetch_catalog
from ..config.settings import settings
from ..logs import log_error, log_system
from .models import CatalogEntry

logger = logging.getLogger(__name__)

UNEXPECTED_MESSAGE = "An unexpected error occurred."


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Failed:
    message: str
    kind: Literal["network", "unexpected"]


@dataclass(frozen=True)
class Ready:
    entries: Tuple[CatalogEntry, ...]


LoadState = Union[Loading, Failed, Ready]


class CatalogLoader:
    """Owns the load state of one catalog view.

    Create one per view, call :meth:`load` to fill it and :meth:`close`
    when the view goes away. Only the most recently started load may
    publish; results of superseded loads are dropped.
    """

    def __init__(self, batch_size: Optional[int] = None):
        self.batch_size = self._check_size(
            batch_size if batch_size is not None else settings.batch_size
        )
        self.state: LoadState = Loading()
        self._generation = 0

    @staticmethod
    def _check_size(batch_size: int) -> int:
        if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size <= 0:
            raise ValueError(f"batch size must be a positive integer, got {batch_size!r}")
        return batch_size

    def set_batch_size(self, batch_size: int) -> bool:
        """Change the batch size. Returns True when a reload is needed."""
        batch_size = self._check_size(batch_size)
        if batch_size == self.batch_size:
            return False
        self.batch_size = batch_size
        self._generation += 1
        self.state = Loading()
        return True

    async def load(self) -> LoadState:
        self._generation += 1
        generation = self._generation
        size = self.batch_size
        self.state = Loading()
        log_system(f"Loading {size} catalog entries")

        try:
            entries = await fetch_catalog(size)
            state: LoadState = Ready(entries=tuple(entries))
        except httpx.HTTPError as e:
            log_error(f"Catalog load failed: {e!r}", e)
            state = Failed(message=f"Failed to fetch catalog: {e}", kind="network")
        except Exception as e:
            log_error(f"Catalog load failed unexpectedly: {e!r}", e)
            state = Failed(message=UNEXPECTED_MESSAGE, kind="unexpected")

        if generation != self._generation:
            logger.info("Discarding superseded load of %d entries", size)
            return self.state
        self.state = state
        if isinstance(state, Ready):
            log_system(f"Loaded {len(state.entries)} catalog entries")
        return state

    def close(self) -> None:
        """Tear down: forget the state and orphan any in-flight load."""
        self._generation += 1
        self.state = Loading()
