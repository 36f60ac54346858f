"""Catalog page of the Streamlit front end."""

from __future__ import annotations

import asyncio

import streamlit as st

from pokedex.catalog.detail import format_experience, format_weight
from pokedex.catalog.loader import CatalogLoader, Failed, Loading, Ready
from pokedex.catalog.view import CatalogView
from pokedex.config.runtime_config import RuntimeConfig, load_runtime_config


def _session(cfg: RuntimeConfig) -> tuple[CatalogLoader, CatalogView]:
    """Loader and view live as long as the browser session."""
    if "loader" not in st.session_state:
        st.session_state["loader"] = CatalogLoader(cfg.effective_batch_size())
        st.session_state["view"] = CatalogView()
    return st.session_state["loader"], st.session_state["view"]


def _reload() -> None:
    st.session_state["loader"].close()


def _render_detail(view: CatalogView, cfg: RuntimeConfig) -> None:
    entry = view.selected
    with st.container(border=True):
        prev_col, body, next_col = st.columns([1, 4, 1])
        if view.show_navigation:
            prev_col.button("◀ Previous", key="detail_prev", on_click=view.previous)
            next_col.button("Next ▶", key="detail_next", on_click=view.next)

        with body:
            st.subheader(entry.name.capitalize())
            if cfg.ui.show_images and entry.image_url:
                st.image(entry.image_url, width=128)
            st.markdown(f"**ID:** #{entry.id}")
            badges = " ".join(f":blue-background[{c}]" for c in entry.categories)
            st.markdown(f"**Types:** {badges}")
            st.markdown(f"**Weight:** {format_weight(entry.weight)}")
            st.markdown(f"**Base experience:** {format_experience(entry.base_experience)}")
            st.button("Close", key="detail_close", on_click=view.close)


def _render_grid(view: CatalogView, cfg: RuntimeConfig) -> None:
    cols = st.columns(cfg.ui.grid_columns)
    for i, entry in enumerate(view.filtered):
        with cols[i % cfg.ui.grid_columns]:
            with st.container(border=True):
                if cfg.ui.show_images and entry.image_url:
                    st.image(entry.image_url, width=96)
                st.button(
                    entry.name.capitalize(),
                    key=f"card_{entry.id}",
                    on_click=view.select,
                    args=(i,),
                )


def main() -> None:
    cfg = load_runtime_config()
    st.set_page_config(page_title=cfg.ui.page_title, layout="wide")
    st.title(cfg.ui.page_title)

    loader, view = _session(cfg)

    batch_size = st.sidebar.number_input(
        "Batch size", min_value=1, value=loader.batch_size, step=1
    )
    loader.set_batch_size(int(batch_size))
    st.sidebar.button("Reload", on_click=_reload)

    if isinstance(loader.state, Loading):
        with st.spinner("Loading Pokédex..."):
            state = asyncio.run(loader.load())
        if isinstance(state, Ready):
            view.set_entries(state.entries)

    state = loader.state
    if isinstance(state, Failed):
        st.error(f"An error occurred: {state.message}")
        return
    if not isinstance(state, Ready):
        st.info("Loading Pokédex...")
        return

    view.set_term(st.text_input("Search", placeholder="Search Pokémon...", key="search_term"))

    if view.selected is not None:
        _render_detail(view, cfg)

    if view.is_empty:
        st.info(view.empty_message)
    else:
        _render_grid(view, cfg)


if __name__ == "__main__":  # pragma: no cover - streamlit entry point
    main()
