"""Runner configuration."""

from __future__ import annotations

from dataclasses import dataclass

SEQUENTIAL = "sequential"
CHAINED = "chained"
STRATEGIES = (SEQUENTIAL, CHAINED)


@dataclass(frozen=True)
class RunnerConfig:
    default_initial_state: str = "initial"
    strategy: str = SEQUENTIAL

    def __post_init__(self) -> None:
        if not isinstance(self.default_initial_state, str) or not self.default_initial_state:
            raise ValueError("Field 'default_initial_state' must be a non-empty str")
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Field 'strategy' must be one of {', '.join(STRATEGIES)}; got {self.strategy!r}")


__all__ = ["CHAINED", "SEQUENTIAL", "STRATEGIES", "RunnerConfig"]
