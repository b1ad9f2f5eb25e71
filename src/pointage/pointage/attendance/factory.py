from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import PunchType
from .strategies.arrival_strategy import ArrivalStrategy
from .strategies.base import PunchStrategy
from .strategies.break_in_strategy import BreakInStrategy
from .strategies.break_out_strategy import BreakOutStrategy
from .strategies.departure_strategy import DepartureStrategy


def _default_strategies() -> dict[PunchType, PunchStrategy]:
    strategies = [ArrivalStrategy(), BreakOutStrategy(), BreakInStrategy(), DepartureStrategy()]
    return {s.punch_type: s for s in strategies}


@dataclass
class PunchStrategyFactory:
    """Factory Pattern: one strategy per punch type, covering every PunchType."""

    strategies: dict[PunchType, PunchStrategy] = field(default_factory=_default_strategies)

    def __post_init__(self) -> None:
        missing = set(PunchType) - set(self.strategies)
        if missing:
            names = ", ".join(sorted(p.value for p in missing))
            raise ValueError(f"No punch strategy registered for: {names}")

    def for_punch(self, punch_type: PunchType) -> PunchStrategy:
        return self.strategies[PunchType(punch_type)]
