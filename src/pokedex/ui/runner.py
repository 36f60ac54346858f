from __future__ import annotations

import sys
from pathlib import Path

import streamlit.web.cli as stcli


def main() -> None:
    """Launch the Streamlit catalog page."""
    script = Path(__file__).with_name("app.py")
    sys.argv = ["streamlit", "run", str(script)]
    stcli.main()
