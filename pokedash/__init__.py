"""
Core package for the Pokemon data dashboard.

Submodules provide data loading, record mapping, aggregation, filtering, and
user interface rendering helpers that are orchestrated by the top-level `app.py`.
"""
