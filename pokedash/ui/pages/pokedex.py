from __future__ import annotations

import pandas as pd
import streamlit as st

from pokedash.ui.components.tables import render_pokemon_table
from pokedash.ui.pages.context import PageContext


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.caption(f"Showing {len(df)} of {len(context.all_df)} Pokemon")
    render_pokemon_table(df)
