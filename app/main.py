import streamlit as st

from components import count_section, display_grid, reseed_section, step_section
from state import get_rng, get_state, put_state, set_default_state
from swatch_grid.errors import SwatchError
from swatch_grid.logging_config import setup_logging
from swatch_grid.render import SwatchRenderer
from swatch_grid.viewer import WINDOW_TITLE

setup_logging()
st.set_page_config(layout="wide", page_title=WINDOW_TITLE)

renderer = SwatchRenderer()


# --------- Main App ---------

set_default_state()

grid_col, control_col = st.columns([0.75, 0.25])

with control_col:
    state = get_state()
    state = count_section(state)
    state = reseed_section(state, get_rng())
    state = step_section(state, get_rng())
    put_state(state)
    st.caption(f"seed={state.seed:.4f} step={state.step:.6f}")

with grid_col:
    try:
        result = renderer.render_grid(get_state().to_request())
    except SwatchError as e:
        # skip this frame's grid; the next interaction triggers a fresh render
        st.error(f"Render failed: {e}")
    else:
        display_grid(result)
