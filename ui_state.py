from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Protocol

from stages import (
    NEXT_STAGE,
    SQUEEZE_MAX,
    SQUEEZE_MIN,
    STAGE_ASSETS,
    Stage,
    button_label_for,
)


class RandomRange(Protocol):
    def next(self, low: int, high: int) -> int:
        """Integer in the inclusive range [low, high]."""
        ...


class RandomSource:
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)


@dataclass(frozen=True)
class StageDescriptor:
    image_key: str
    text_key: str
    alt_text_key: str
    button_label: str
    button_enabled: bool


class StageController:
    """
    Owns the lemonade flow: current stage, squeezes left and whether the
    stage's taps are done. The GUI reads describe() after every change.
    """

    def __init__(self, rng: RandomRange | None = None):
        self.rng = rng if rng is not None else RandomSource()
        self.stage = Stage.SELECT
        self.remaining_taps = 0
        self.complete = False

    def enter_stage(self, stage: Stage | int) -> None:
        self.stage = Stage(stage)
        self.complete = False
        if self.stage is Stage.SQUEEZE:
            self.remaining_taps = self.rng.next(SQUEEZE_MIN, SQUEEZE_MAX)

    def tap(self) -> None:
        if self.stage is Stage.SQUEEZE:
            # Clamp so extra taps after completion leave the count at 0
            self.remaining_taps = max(0, self.remaining_taps - 1)
            if self.remaining_taps == 0:
                self.complete = True
        else:
            self.complete = True

    def advance(self) -> bool:
        """Move to the next stage. Returns False (and does nothing) if incomplete."""
        if not self.complete:
            return False
        self.enter_stage(NEXT_STAGE[self.stage])
        return True

    def describe(self) -> StageDescriptor:
        image_key, text_key, alt_text_key = STAGE_ASSETS[self.stage]
        return StageDescriptor(
            image_key=image_key,
            text_key=text_key,
            alt_text_key=alt_text_key,
            button_label=button_label_for(self.stage),
            button_enabled=self.complete,
        )
