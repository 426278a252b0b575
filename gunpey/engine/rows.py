"""Random row generation for the "new row cycles in" mechanic."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..core.constants import FragmentKind
from ..core.models import Cell
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

RowSource = Callable[[int], List[Cell]]


@dataclass
class RowGeneratorConfig:
    """Configuration values driving row generation.

    Roughly half of a new row is filled with fragments: each row draws its own
    fill percentage between the two bounds, then fills every cell with that
    probability.
    """

    min_fill_percent: float = 40.0
    max_fill_percent: float = 60.0
    rng_seed: Optional[int] = None

    def validate(self) -> None:
        for value in (self.min_fill_percent, self.max_fill_percent):
            if not 0.0 <= value <= 100.0:
                raise ValueError(f"fill percentage {value} is outside [0, 100]")
        if self.min_fill_percent > self.max_fill_percent:
            raise ValueError(
                f"min_fill_percent {self.min_fill_percent} exceeds "
                f"max_fill_percent {self.max_fill_percent}"
            )


class RowGenerator:
    """Produces rows of random, inactive cells."""

    def __init__(
        self,
        config: Optional[RowGeneratorConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or RowGeneratorConfig()
        self.config.validate()
        self.rng = rng or random.Random(self.config.rng_seed)

    def generate(self, width: int) -> List[Cell]:
        if width <= 0:
            raise ValueError("row width must be greater than 0")
        fill_percent = self.rng.uniform(self.config.min_fill_percent, self.config.max_fill_percent)
        kinds = list(FragmentKind)
        row = [
            Cell.filled(self.rng.choice(kinds)) if self.rng.random() * 100.0 < fill_percent else Cell.empty()
            for _ in range(width)
        ]
        LOGGER.debug(
            "generated row of width %s at %.1f%% fill: %s",
            width,
            fill_percent,
            "".join(cell.to_char() for cell in row),
        )
        return row

    __call__ = generate


def new_random_row(width: int, rng: Optional[random.Random] = None) -> List[Cell]:
    """Generate one row with the default fill proportions."""

    return RowGenerator(rng=rng).generate(width)
