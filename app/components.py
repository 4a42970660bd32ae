from __future__ import annotations

import random

import streamlit as st

from swatch_grid.errors import SwatchError
from swatch_grid.layout import grid_cells
from swatch_grid.render import DEFAULT_MAX_COUNT, RenderResult
from swatch_grid.types import StepPreset
from swatch_grid.viewer import ViewerState, reseed, set_count, set_step

STEP_LABELS = {
    StepPreset.PHI: "phi",
    StepPreset.SQRT2: "sqrt2",
    StepPreset.PI: "pi",
    StepPreset.E: "e",
    StepPreset.RANDOM: "rand",
}


def display_grid(result: RenderResult) -> None:
    """Lay swatches out row by row; trailing cells of the last row stay empty."""
    rows = [st.columns(result.shape.cols) for _ in range(result.shape.rows)]
    for row, col, index in grid_cells(result.shape, len(result.images)):
        with rows[row][col]:
            st.image(result.images[index].data, use_container_width=True)


def count_section(state: ViewerState) -> ViewerState:
    count: int = st.number_input(
        "Colors",
        min_value=1,
        max_value=DEFAULT_MAX_COUNT,
        value=state.count,
        key="count",
    )
    if count == state.count:
        return state
    return set_count(state, int(count))


def reseed_section(state: ViewerState, rng: random.Random) -> ViewerState:
    if st.button("Reseed", key="reseed_btn", use_container_width=True):
        return reseed(state, rng)
    return state


def step_section(state: ViewerState, rng: random.Random) -> ViewerState:
    st.text("Step by:")
    preset_cols = st.columns(len(STEP_LABELS))
    for column, (preset, label) in zip(preset_cols, STEP_LABELS.items()):
        with column:
            if st.button(label, key=f"step_{preset.value}", use_container_width=True):
                state = set_step(state, preset, rng)

    literal: str = st.text_input("Custom step", value="", key="custom_step")
    prev_literal: str = st.session_state.get("custom_step_prev", "")
    st.session_state["custom_step_prev"] = literal
    if literal and literal != prev_literal:
        try:
            state = set_step(state, float(literal), rng)
        except (ValueError, SwatchError) as e:
            st.error(f"Invalid step: {e}")
    return state


__all__ = [
    "display_grid",
    "count_section",
    "reseed_section",
    "step_section",
]
