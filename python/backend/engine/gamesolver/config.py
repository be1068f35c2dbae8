"""Search configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    """Knobs shared by every search driver.

    ``key_border``
        Width of the outer ring left out of visited-state keys.  ``1``
        skips the wall around a standard level; ``0`` keys every cell.
    ``deepening_limit``
        Highest depth iterative deepening tries before giving up.
        ``None`` keeps deepening until the state space is exhausted.
    """

    key_border: int = 0
    deepening_limit: int | None = None

    def __post_init__(self) -> None:
        if self.key_border < 0:
            raise ValueError(f"key_border must be >= 0, got {self.key_border}")
        if self.deepening_limit is not None and self.deepening_limit < 1:
            raise ValueError(
                f"deepening_limit must be >= 1, got {self.deepening_limit}"
            )
