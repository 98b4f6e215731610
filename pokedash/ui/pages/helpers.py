from __future__ import annotations

import pandas as pd


def type_counts(df: pd.DataFrame) -> pd.DataFrame:
    """Pokemon per type; a dual-type pokemon counts once for each of its types."""
    if df.empty:
        return pd.DataFrame(columns=["Type", "Pokemon"])
    exploded = df[["id", "types"]].explode("types")
    grouped = (
        exploded.groupby("types")["id"]
        .nunique()
        .reset_index(name="Pokemon")
        .rename(columns={"types": "Type"})
    )
    return grouped.sort_values(["Pokemon", "Type"], ascending=[False, True]).reset_index(drop=True)
