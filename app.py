import pokedash.bootstrap_env  # must be first to set env/secrets
import streamlit as st

from pokedash.config import TABS, get_settings
from pokedash.data.filters import apply_filters
from pokedash.data.loader import load_pokemon
from pokedash.data.stats import compute_stats
from pokedash.errors import PokedashError
from pokedash.ui.components.kpi import render_kpi_cards, stats_to_cards
from pokedash.ui.layout import filter_controls_ui, render_header, setup_page
from pokedash.ui.pages import pokedex, type_breakdown
from pokedash.ui.pages.context import PageContext
from pokedash.utils.logging import configure_logging, get_logger

logger = get_logger("pokedash.app")

PAGE_RENDERERS = {
    "pokedex": pokedex.render,
    "type_breakdown": type_breakdown.render,
}

DATA_KEY = "pd_pokemon"
ERROR_KEY = "pd_load_error"


def _clear_loaded_data() -> None:
    st.session_state.pop(DATA_KEY, None)
    st.session_state.pop(ERROR_KEY, None)


def _ensure_loaded(settings) -> None:
    """Fetch the record set once per session; remember a failure instead of refetching."""
    if DATA_KEY in st.session_state or ERROR_KEY in st.session_state:
        return
    with st.spinner("Loading Pokemon data..."):
        try:
            st.session_state[DATA_KEY] = load_pokemon(settings)
        except PokedashError as exc:
            logger.exception("Error fetching Pokemon")
            st.session_state[ERROR_KEY] = str(exc)


def main() -> None:
    setup_page()
    settings = get_settings()
    configure_logging(settings.log_level, json_logs=settings.log_json)
    render_header()

    if st.sidebar.button("🔄 Refresh Data"):
        _clear_loaded_data()

    _ensure_loaded(settings)

    if ERROR_KEY in st.session_state:
        st.error(f"Could not load Pokemon data: {st.session_state[ERROR_KEY] or 'unknown error'}")
        if st.button("Retry", key="pd_retry"):
            _clear_loaded_data()
            st.rerun()
        return

    all_df = st.session_state[DATA_KEY].to_frame()
    stats = compute_stats(all_df)
    render_kpi_cards(stats_to_cards(stats))

    criteria = filter_controls_ui(all_df)
    filtered_df = apply_filters(all_df, criteria)

    context = PageContext(all_df=all_df, stats=stats)

    streamlit_tabs = st.tabs([tab.label for tab in TABS])
    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(filtered_df, context)


if __name__ == "__main__":
    main()
