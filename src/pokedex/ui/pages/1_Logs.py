"""Logs viewing page."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from pokedex.logs import LOG_TYPES, read_logs


def format_log_entries(logs: list[dict]):
    """Format log entries for display, colour-coding the level column."""
    if not logs:
        return pd.DataFrame()

    df = pd.DataFrame(logs)

    def color_level(level):
        if level == "ERROR":
            return "background-color: #ffcccc"
        elif level == "WARNING":
            return "background-color: #fff2cc"
        elif level == "INFO":
            return "background-color: #e6f3ff"
        return ""

    return df.style.apply(
        lambda row: [color_level(row["level"]) if col == "level" else "" for col in df.columns],
        axis=1,
    )


def render_log_tab(log_type: str) -> None:
    """Render a tab for a specific log type with filtering options."""
    col1, col2, col3 = st.columns(3)
    with col1:
        search_text = st.text_input(f"Search in {log_type} logs", key=f"search_{log_type}")
    with col2:
        level = st.selectbox(
            "Filter by level",
            ["All", "INFO", "WARNING", "ERROR", "DEBUG"],
            key=f"level_{log_type}",
        )
    with col3:
        max_entries = st.number_input(
            "Max lines", min_value=10, max_value=10000, value=200, key=f"max_{log_type}"
        )

    logs = read_logs(
        log_type,
        max_lines=int(max_entries),
        search_text=search_text or None,
        level_filter=None if level == "All" else level,
    )
    if not logs:
        st.info(f"No {log_type} log entries found.")
        return
    st.dataframe(format_log_entries(logs), hide_index=True)


def main() -> None:
    st.title("Logs")
    tabs = st.tabs([t.capitalize() for t in LOG_TYPES])
    for tab, log_type in zip(tabs, LOG_TYPES):
        with tab:
            render_log_tab(log_type)


if __name__ == "__main__":  # pragma: no cover - streamlit entry point
    main()
