"""Rendering engine plugin interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence


class RenderingEnginePlugin(ABC):
    """Contract for plugins that draw graph elements onto a surface."""

    @property
    @abstractmethod
    def plugin_id(self) -> str:
        """Return a unique, stable plugin identifier."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Return a human-readable plugin name for UI and logs."""

    def render_options_schema(self) -> dict[str, Any] | None:
        """Return an optional render options schema for UI/platform integration."""
        return None

    @abstractmethod
    def create_instance(
        self,
        surface: Any,
        elements: Sequence[Mapping[str, Any]],
        style_rules: Sequence[Mapping[str, Any]],
        layout: Mapping[str, Any],
    ) -> Any:
        """Create one engine instance bound to ``surface`` and return its handle."""

    @abstractmethod
    def destroy(self, handle: Any) -> None:
        """Release the engine instance behind ``handle``."""
