# streamlit_app.py

import streamlit as st
from interface.backend.session import initialize_session_state
from interface.ui_global_config import instantiate_readset_config

from readset_pipeline.config import __VERSION__

st.set_page_config(
    page_title="readset-builder | Sanger reads",
    page_icon="🧬",
    layout="wide",
    initial_sidebar_state="expanded",
)

def main():
    initialize_session_state()
    instantiate_readset_config()

    custom_pages = {"Analysis Tools": []}
    custom_pages["Analysis Tools"].append(
        st.Page("interface/home.py", title="Home", icon=":material/info:")
    )

    custom_pages["Analysis Tools"].append(
        st.Page("interface/readset_builder.py", title="Build Readset", icon=":material/file_present:")
    )

    if st.session_state.forward_files or st.session_state.reverse_files:
        custom_pages["Analysis Tools"].append(
            st.Page("interface/read_viewer.py", title="Chromatogram Viewer", icon=":material/insights:")
        )

    # Register pages
    page = st.navigation(custom_pages)
    page.run()

    st.divider()
    st.caption(f"readset-builder v {__VERSION__}")

if __name__ == "__main__":
    main()
