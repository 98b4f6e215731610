"""
Summary statistics derived from the full pokemon record set.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

import numpy as np
import pandas as pd

from pokedash.config import SPEEDY_THRESHOLD


@dataclass(frozen=True)
class DashboardStats:
    total: int = 0
    avg_attack: int = 0
    max_hp: int = 0
    speedy_count: int = 0
    avg_weight: int = 0  # kilograms

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; 2.5 must become 3
    return int(np.floor(value + 0.5))


def compute_stats(df: pd.DataFrame, speedy_threshold: int = SPEEDY_THRESHOLD) -> DashboardStats:
    if df.empty:
        return DashboardStats()

    total = int(len(df))
    attack = pd.to_numeric(df["attack"])
    weight = pd.to_numeric(df["weight"])
    return DashboardStats(
        total=total,
        avg_attack=round_half_up(attack.sum() / total),
        max_hp=int(pd.to_numeric(df["hp"]).max()),
        speedy_count=int((pd.to_numeric(df["speed"]) >= speedy_threshold).sum()),
        avg_weight=round_half_up(weight.sum() / total / 10),
    )
