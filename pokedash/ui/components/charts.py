"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st


DEFAULT_TEMPLATE = "plotly_white"
DEFAULT_COLOR_SEQUENCE = [
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
]


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        colorway=DEFAULT_COLOR_SEQUENCE,
        title=title,
        margin=dict(l=40, r=20, t=60, b=40),
    )
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, zeroline=True)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def bar_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    text_auto: bool = False,
) -> go.Figure:
    fig = px.bar(df, x=x, y=y, text_auto=text_auto)
    fig = _configure_layout(fig, title, yaxis_title)
    if text_auto:
        fig.update_traces(textposition="outside", cliponaxis=False)
    return fig


def scatter_plot(
    df: pd.DataFrame,
    x: str,
    y: str,
    color: Optional[str] = None,
    hover_data: Optional[List[str]] = None,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
) -> go.Figure:
    fig = px.scatter(df, x=x, y=y, color=color, hover_data=hover_data)
    fig = _configure_layout(fig, title, yaxis_title)
    return fig
