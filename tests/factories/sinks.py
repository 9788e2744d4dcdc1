"""Diagnostic sinks for asserting on log events without capturing output."""

from typing import Any


class RecordingLogger:
    """Records structlog-style warning and debug calls."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str, dict[str, Any]]] = []

    def warning(self, event: str, **kwargs: Any) -> None:
        self.events.append(("warning", event, kwargs))

    def debug(self, event: str, **kwargs: Any) -> None:
        self.events.append(("debug", event, kwargs))

    def named(self, event: str) -> list[dict[str, Any]]:
        return [kwargs for _, name, kwargs in self.events if name == event]
