# interface/ui_upload.py

import tempfile
import streamlit as st
import pandas as pd


def save_temp_file(uploaded_file):
    suffix = "." + uploaded_file.name.split(".")[-1]
    temp_file = tempfile.NamedTemporaryFile(delete=False, suffix=suffix)
    temp_file.write(uploaded_file.getvalue())
    temp_file.close()
    return temp_file.name


@st.dialog("Delete all files?", width="small")
def clear_files_dialog():
    st.text("This cannot be undone.")

    col_yes, col_no = st.columns(2)

    with col_yes:
        if st.button("Yes", use_container_width=True):
            st.session_state.forward_files = []
            st.session_state.reverse_files = []
            st.session_state.readset = None
            st.session_state.summary_df = pd.DataFrame()
            st.rerun()

    with col_no:
        if st.button("Cancel", type="primary", use_container_width=True):
            st.rerun()


def _add_uploads(uploaded, key: str) -> int:
    known = {f["name"] for f in st.session_state.forward_files + st.session_state.reverse_files}
    added = 0
    for f in uploaded:
        if f.name in known:
            st.warning(f"`{f.name}` is already uploaded; skipped.")
            continue
        st.session_state[key].append({"name": f.name, "path": save_temp_file(f)})
        added += 1
    return added


@st.dialog("Upload Files", width="large")
def file_upload_dialog():
    fwd_col, rev_col = st.columns(2)
    with fwd_col:
        forward = st.file_uploader("Forward reads (`.ab1`)", type=["ab1"], accept_multiple_files=True)
    with rev_col:
        reverse = st.file_uploader("Reverse reads (`.ab1`)", type=["ab1"], accept_multiple_files=True)

    if st.button("Add files", type="primary", use_container_width=True, disabled=not (forward or reverse)):
        added = _add_uploads(forward or [], "forward_files") + _add_uploads(reverse or [], "reverse_files")
        if added:
            st.session_state.readset = None
            st.session_state.summary_df = pd.DataFrame()
        st.rerun()


def show_uploaded_files_table():
    files = (
        [{"Filename": f["name"], "Orientation": "forward"} for f in st.session_state.forward_files]
        + [{"Filename": f["name"], "Orientation": "reverse"} for f in st.session_state.reverse_files]
    )
    if not files:
        st.info("No files uploaded yet.")
        return

    st.dataframe(pd.DataFrame(files), use_container_width=True, hide_index=True)


def upload_file_ui():
    has_files = bool(st.session_state.forward_files or st.session_state.reverse_files)
    if has_files:
        col_upload, col_clear = st.columns([6, 1])
        with col_upload:
            if st.button("Upload Files", icon=":material/upload:", use_container_width=True):
                file_upload_dialog()
        with col_clear:
            if st.button("", icon=":material/delete_sweep:", use_container_width=True, type="primary", key="clear_uploaded_files"):
                clear_files_dialog()
    else:
        if st.button("Upload Files", icon=":material/upload:", use_container_width=True):
            file_upload_dialog()

    show_uploaded_files_table()
