"""Viewer state and its reducers.

The host keeps one :class:`ViewerState` and replaces it whenever the user
reseeds, picks a step or changes the count. Reducers are pure apart from the
random draw, which comes from a caller-supplied ``random.Random``. Each render
takes a snapshot via :meth:`ViewerState.to_request`.
"""

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional, Union

from swatch_grid.hues import DEFAULT_STEP, resolve_step
from swatch_grid.request import SwatchRequest, check_count
from swatch_grid.types import StepPreset

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 20
WINDOW_TITLE = "Color viewer"


@dataclass(frozen=True)
class ViewerState:
    """User-controlled inputs of the swatch viewer.

    Attributes:
        count: Number of swatches shown.
        seed: Starting hue in ``[0, 1)``.
        step: Hue increment between swatches.
    """

    count: int = DEFAULT_COUNT
    seed: float = 0.0
    step: float = DEFAULT_STEP

    def to_request(self) -> SwatchRequest:
        return SwatchRequest(count=self.count, seed=self.seed, step=self.step)


def initial_state(rng: Optional[random.Random] = None) -> ViewerState:
    """Default viewer state with a random seed."""
    rng = rng or random.Random()
    return ViewerState(seed=rng.random())


def reseed(state: ViewerState, rng: Optional[random.Random] = None) -> ViewerState:
    """Draw a new uniform seed in ``[0, 1)``; ``step`` is left unchanged."""
    rng = rng or random.Random()
    new_state = replace(state, seed=rng.random())
    logger.info("New seed: %s", new_state.seed)
    return new_state


def set_step(
    state: ViewerState,
    preset_or_value: Union[StepPreset, str, float],
    rng: Optional[random.Random] = None,
) -> ViewerState:
    """Set the step from a preset name or any literal real.

    Raises:
        InvalidStep: Unknown preset or non-finite value.
    """
    new_state = replace(state, step=resolve_step(preset_or_value, rng))
    logger.info("New step: %s", new_state.step)
    return new_state


def set_count(state: ViewerState, count: int) -> ViewerState:
    """Change the swatch count.

    Raises:
        InvalidCount: If ``count`` is not a positive integer.
    """
    return replace(state, count=check_count(count))
