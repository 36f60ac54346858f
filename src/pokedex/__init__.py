"""Pokédex catalog browser - core package initialization."""

from __future__ import annotations

from .config.settings import settings

__all__ = ["settings"]
