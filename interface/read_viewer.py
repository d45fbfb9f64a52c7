# interface/read_viewer.py

import streamlit as st

from interface.plotting.chromatogram import make_chromatogram_figure
from readset_pipeline.core.abi_loader import load_abi
from readset_pipeline.core.chromatogram import summarise_trace
from readset_pipeline.errors import UnreadableFileError


class ReadViewerApp:
    def __init__(self):
        self.config = st.session_state.config
        self.files = {
            f["name"]: f["path"]
            for f in st.session_state.forward_files + st.session_state.reverse_files
        }

    def render(self):
        st.title("📈 Chromatogram Viewer")

        if not self.files:
            st.warning("No chromatograms found. Please upload files first.")
            return

        names = list(self.files.keys())
        selected = st.selectbox("Select Read", names)
        st.session_state.selected_read = selected
        path = self.files[selected]

        try:
            trace = load_abi(path)
        except UnreadableFileError as e:
            st.error(str(e))
            return

        decoded = summarise_trace(trace, self.config.trim_cutoff, self.config.secondary_peak_ratio, file_path=path)

        self._show_summary(path, decoded)
        st.plotly_chart(make_chromatogram_figure(trace, decoded), use_container_width=True)

    def _show_summary(self, path, decoded):
        summary = decoded.summary
        col1, col2, col3 = st.columns(3)
        col1.metric("Trim window", f"{summary.trim_start}–{summary.trim_finish}")
        col2.metric("Secondary peaks (trimmed)", summary.trimmed_secondary_peaks)
        col3.metric("Mean quality (trimmed)", f"{summary.trimmed_mean_quality:.1f}")

        df = st.session_state.summary_df
        if not df.empty and path in set(df["file.path"]):
            included = bool(df.loc[df["file.path"] == path, "read.included.in.readset"].iloc[0])
            if included:
                st.success("Included in the current readset.", icon=":material/check_circle_outline:")
            else:
                st.warning("Excluded from the current readset.", icon=":material/filter_alt:")


ReadViewerApp().render()
