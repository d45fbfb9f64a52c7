# interface/backend/session.py

import streamlit as st
import pandas as pd


def initialize_session_state():
    defaults = {
        "forward_files": [],               # uploaded forward file metadata
        "reverse_files": [],               # uploaded reverse file metadata
        "config": None,                    # ReadsetConfig instance
        "readset": None,                   # last built Readset
        "summary_df": pd.DataFrame(),      # read summaries of the last build
        "selected_read": None,             # file path shown in the viewer
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value
