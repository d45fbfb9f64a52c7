# interface/home.py

import streamlit as st


def run():
    st.title("🧬 Welcome to `readset-builder`")
    st.markdown(
        """
        This app builds a set of unaligned reads from **Sanger chromatograms** (`.ab1`).

        **Features:**
        - Upload forward and reverse `.ab1` files
        - Mott quality trimming
        - Secondary peaks encoded as IUPAC ambiguity codes
        - Filter reads by secondary peaks and length
        - Inspect chromatograms, download the readset (FASTA) and summaries (CSV)

        **Next step:** Go to the **Build Readset** page to begin.
        """
    )

run()
