"""
Layout helpers for the Streamlit application (page setup, header, filter controls).
"""

from __future__ import annotations

from typing import List

import pandas as pd
import streamlit as st

from pokedash.config import ALL_TYPES, WEIGHT_SLIDER_MAX, WEIGHT_SLIDER_STEP
from pokedash.data.filters import DEFAULT_CRITERIA, FilterCriteria, available_types
from pokedash.ui.components.formatting import format_type_label


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Pokemon Data Dashboard",
        layout="wide",
        page_icon=":bar_chart:",
    )


def render_header() -> None:
    st.title("Pokemon Data Dashboard")
    st.caption("Website to show you the stats of 150 pokemon!")


def _type_label(value: str) -> str:
    return "All Types" if value == ALL_TYPES else format_type_label(value)


def filter_controls_ui(df: pd.DataFrame, defaults: FilterCriteria = DEFAULT_CRITERIA) -> FilterCriteria:
    """Render the search, type, and weight controls and return the chosen criteria."""
    type_options: List[str] = [ALL_TYPES] + available_types(df)

    col_search, col_type, col_weight = st.columns(3)
    with col_search:
        search = st.text_input(
            "Search by Name",
            value=defaults.search,
            placeholder="Search Pokemon...",
            key="pd_search",
        )
    with col_type:
        selected_type = st.selectbox(
            "Filter by Type",
            options=type_options,
            index=type_options.index(defaults.type) if defaults.type in type_options else 0,
            format_func=_type_label,
            key="pd_type",
        )
    with col_weight:
        current = st.session_state.get("pd_min_weight", defaults.min_weight)
        min_weight = st.slider(
            f"Min Weight: {current / 10:g} kg",
            min_value=0,
            max_value=WEIGHT_SLIDER_MAX,
            value=defaults.min_weight,
            step=WEIGHT_SLIDER_STEP,
            key="pd_min_weight",
        )

    return FilterCriteria(search=search, type=selected_type, min_weight=int(min_weight))
