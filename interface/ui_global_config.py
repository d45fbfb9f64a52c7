# interface/ui_global_config.py

import streamlit as st
from readset_pipeline.config import ReadsetConfig, resolve_config


def instantiate_readset_config():
    if "config" not in st.session_state or st.session_state.config is None:
        st.session_state.config = ReadsetConfig()


def readset_config_ui():
    instantiate_readset_config()
    cfg: ReadsetConfig = st.session_state.config

    with st.expander("Advanced options"):
        col1, col2 = st.columns(2)

        with col1:
            trim = st.checkbox("Quality-trim reads (Mott)", value=cfg.trim)
            trim_cutoff = st.number_input(
                "Trim cutoff", value=cfg.trim_cutoff, min_value=1e-10, max_value=0.99,
                format="%.6f", disabled=not trim,
            )
            min_length = st.number_input("Minimum read length", value=cfg.min_length, min_value=0, step=1)

        with col2:
            limit_peaks = st.checkbox("Limit secondary peaks", value=cfg.max_secondary_peaks is not None)
            max_peaks = st.number_input(
                "Maximum secondary peaks", value=cfg.max_secondary_peaks or 0, min_value=0, step=1,
                disabled=not limit_peaks,
            )
            ratio = st.slider("Secondary peak ratio", min_value=0.01, max_value=0.99, value=cfg.secondary_peak_ratio)

    st.session_state.config = resolve_config(
        cfg,
        trim=trim,
        trim_cutoff=float(trim_cutoff),
        min_length=int(min_length),
        max_secondary_peaks=int(max_peaks) if limit_peaks else None,
        secondary_peak_ratio=float(ratio),
    )
