"""
Reusable helpers for rendering the pokemon table with consistent configuration.
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from pokedash.ui.components.formatting import format_pokedex_id, format_types, format_weight_kg

DISPLAY_COLUMNS = [
    "Sprite",
    "Pokemon",
    "No.",
    "Types",
    "HP",
    "Attack",
    "Defense",
    "Speed",
    "Weight",
]

EMPTY_MESSAGE = "No Pokemon found matching your filters"


def prepare_display(df: pd.DataFrame) -> pd.DataFrame:
    """Shape record rows into the table the dashboard shows."""
    if df.empty:
        return pd.DataFrame(columns=DISPLAY_COLUMNS)
    return pd.DataFrame(
        {
            "Sprite": df["sprite"],
            "Pokemon": df["name"],
            "No.": df["id"].map(format_pokedex_id),
            "Types": df["types"].map(format_types),
            "HP": df["hp"],
            "Attack": df["attack"],
            "Defense": df["defense"],
            "Speed": df["speed"],
            "Weight": df["weight"].map(format_weight_kg),
        },
        columns=DISPLAY_COLUMNS,
    ).reset_index(drop=True)


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    export = df.copy()
    if "types" in export:
        export["types"] = export["types"].map(lambda types: "|".join(types))
    return export.to_csv(index=False).encode("utf-8")


def render_pokemon_table(
    df: pd.DataFrame,
    height: int = 600,
    export_file_name: str = "pokemon_filtered.csv",
) -> None:
    if df.empty:
        st.info(EMPTY_MESSAGE)
        return

    st.dataframe(
        prepare_display(df),
        use_container_width=True,
        height=height,
        hide_index=True,
        column_config={
            "Sprite": st.column_config.ImageColumn("Sprite", width="small"),
            "HP": st.column_config.NumberColumn("HP", format="%d"),
            "Attack": st.column_config.NumberColumn("Attack", format="%d"),
            "Defense": st.column_config.NumberColumn("Defense", format="%d"),
            "Speed": st.column_config.NumberColumn("Speed", format="%d"),
        },
    )

    st.download_button(
        "Download CSV",
        data=to_csv_bytes(df),
        file_name=export_file_name,
        mime="text/csv",
    )
