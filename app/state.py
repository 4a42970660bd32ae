from __future__ import annotations

import random

import streamlit as st

from swatch_grid.viewer import ViewerState, initial_state


def set_default_state() -> None:
    if "viewer" not in st.session_state:
        st.session_state["rng"] = random.Random()
        st.session_state["viewer"] = initial_state(st.session_state["rng"])


def get_state() -> ViewerState:
    return st.session_state["viewer"]


def put_state(state: ViewerState) -> None:
    st.session_state["viewer"] = state


def get_rng() -> random.Random:
    return st.session_state["rng"]


__all__ = ["set_default_state", "get_state", "put_state", "get_rng"]
