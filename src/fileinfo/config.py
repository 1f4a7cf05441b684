"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TIME_FORMAT = "%m/%d/%Y - %H:%M:%S"


@dataclass(slots=True)
class AppConfig:
    verbose: bool = False
    debug: bool = False
    padding: int = 3
    time_format: str = DEFAULT_TIME_FORMAT

    def __post_init__(self) -> None:
        if self.padding < 1:
            raise ValueError("padding must be at least 1")
