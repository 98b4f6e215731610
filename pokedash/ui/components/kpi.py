from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import streamlit as st

from pokedash.config import SPEEDY_THRESHOLD
from pokedash.data.stats import DashboardStats
from pokedash.ui.components.formatting import format_number


@dataclass
class KpiCard:
    label: str
    value: Optional[float] = None
    value_display: Optional[str] = None
    help_text: Optional[str] = None


def _format_value(card: KpiCard) -> str:
    if card.value_display is not None:
        return card.value_display
    return format_number(card.value)


def stats_to_cards(stats: DashboardStats) -> List[KpiCard]:
    return [
        KpiCard("Total Pokemon", value=stats.total),
        KpiCard("Avg Attack", value=stats.avg_attack),
        KpiCard("Max HP", value=stats.max_hp),
        KpiCard("Speedy Pokemon", value=stats.speedy_count, help_text=f"Speed ≥ {SPEEDY_THRESHOLD}"),
        KpiCard("Avg Weight", value_display=f"{stats.avg_weight} kg"),
    ]


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 5) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                st.metric(label=card.label, value=_format_value(card))
                if card.help_text:
                    st.caption(card.help_text)
