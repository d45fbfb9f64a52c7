# interface/readset_builder.py

import streamlit as st

from interface.ui_upload import upload_file_ui
from interface.ui_global_config import readset_config_ui
from readset_pipeline.errors import ReadsetError
from readset_pipeline.readset import build_readset
from readset_pipeline.utils.exporters import get_exporter


def _display_name_map() -> dict:
    return {f["path"]: f["name"] for f in st.session_state.forward_files + st.session_state.reverse_files}


def run():
    st.title("Upload Chromatograms & Build Readset")

    upload_file_ui()
    readset_config_ui()

    has_files = bool(st.session_state.forward_files or st.session_state.reverse_files)
    if st.button("Build Readset", type="primary", use_container_width=True, disabled=not has_files):
        with st.spinner("Processing all uploaded chromatograms..."):
            try:
                readset = build_readset(
                    [f["path"] for f in st.session_state.forward_files],
                    [f["path"] for f in st.session_state.reverse_files],
                    st.session_state.config,
                )
            except ReadsetError as e:
                st.error(str(e))
                return

        # temp paths are meaningless to the user; show the uploaded names
        summary_df = readset.summaries.copy()
        summary_df["file.name"] = summary_df["file.path"].map(_display_name_map())
        st.session_state.readset = readset
        st.session_state.summary_df = summary_df
        st.success(f"{readset.n_included} of {len(summary_df)} reads included in the readset.")

    if st.session_state.readset is None:
        return

    st.subheader("Read Summaries")
    st.dataframe(st.session_state.summary_df.drop(columns=["file.path", "folder.name"]), use_container_width=True, hide_index=True)

    col_fasta, col_csv = st.columns(2)
    for col, name in ((col_fasta, "fasta"), (col_csv, "summary_csv")):
        kwargs = {"id_map": _display_name_map()} if name == "fasta" else {}
        exporter = get_exporter(name, **kwargs)
        with col:
            st.download_button(
                f"Download {exporter.filename()}",
                data=exporter.export(st.session_state.readset),
                file_name=exporter.filename(),
                use_container_width=True,
            )

run()
