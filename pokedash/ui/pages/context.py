from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from pokedash.data.stats import DashboardStats


@dataclass
class PageContext:
    all_df: pd.DataFrame
    stats: DashboardStats
