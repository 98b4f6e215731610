from __future__ import annotations

import pandas as pd
import streamlit as st

from pokedash.ui.components.charts import bar_chart, render_plotly, scatter_plot
from pokedash.ui.pages.context import PageContext
from pokedash.ui.pages.helpers import type_counts


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Type Breakdown")
    if df.empty:
        st.info("No Pokemon to chart for the current filters.")
        return

    counts = type_counts(df)
    render_plotly(
        bar_chart(
            counts,
            x="Type",
            y="Pokemon",
            title="Pokemon per Type",
            yaxis_title="Pokemon",
            text_auto=True,
        )
    )

    scatter_df = df.assign(primary_type=df["types"].map(lambda types: types[0]))
    render_plotly(
        scatter_plot(
            scatter_df,
            x="attack",
            y="speed",
            color="primary_type",
            hover_data=["name", "hp", "defense"],
            title="Attack vs Speed",
            yaxis_title="Speed",
        )
    )
    st.caption(f"Dual-type Pokemon count once for each type. Dataset average attack: {context.stats.avg_attack}.")
