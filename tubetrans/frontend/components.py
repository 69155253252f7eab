"""
Reusable UI components for the Streamlit app.
"""

import streamlit as st
from typing import List, Optional, Tuple

from tubetrans.core.video_id import embed_url
from tubetrans.models.schemas import TranscriptRecord, ViewTab

TAB_LABELS = {
    ViewTab.ENGLISH: "English",
    ViewTab.BANGLA: "বাংলা",
    ViewTab.BOTH: "Side by Side",
}

FEATURES = [
    ("⚡", "Lightning Fast", "AI-powered extraction means you get your transcript in seconds, not minutes."),
    ("🇧🇩", "Native Bangla", "High-quality translation that understands context, technical terms, and nuances."),
    ("📱", "Responsive Design", "Access your transcripts anywhere - on mobile, tablet, or desktop with ease."),
]


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="TubeTrans",
        page_icon="🎬",
        layout="wide",
    )

    st.title("🎬 TubeTrans")
    st.markdown("### Unlock Video Knowledge, Translated to Bangla.")
    st.markdown("""
    Instantly extract transcripts from any YouTube video and translate them into fluent Bangla.
    Perfect for students, researchers, and creators.
    """)
    st.divider()


def youtube_input() -> Optional[str]:
    """
    Display the YouTube URL form.

    Returns:
        The submitted URL or None
    """
    with st.form(key="youtube_form"):
        url = st.text_input(
            "YouTube URL",
            placeholder="Paste YouTube video link here (e.g., https://youtube.com/watch?v=...)",
        )
        submit = st.form_submit_button("Generate")

    if submit and url.strip():
        return url
    return None


def feature_cards():
    """Display the feature overview shown before the first request."""
    for column, (icon, title, description) in zip(st.columns(len(FEATURES)), FEATURES):
        with column:
            st.markdown(f"## {icon}")
            st.markdown(f"**{title}**")
            st.caption(description)


def display_error(message: str):
    st.error(message)


def available_tabs(record: TranscriptRecord) -> List[ViewTab]:
    """Tabs that can be shown for a record; the Bangla views need a translation."""
    if record.translation:
        return [ViewTab.ENGLISH, ViewTab.BANGLA, ViewTab.BOTH]
    return [ViewTab.ENGLISH]


def tab_switcher(record: TranscriptRecord) -> ViewTab:
    """
    Display the view selector.

    Args:
        record: Record being shown

    Returns:
        The selected tab
    """
    tabs = available_tabs(record)
    return st.radio(
        "View",
        tabs,
        format_func=lambda tab: TAB_LABELS[tab],
        horizontal=True,
        label_visibility="collapsed",
        key=f"view_tab_{record.video_id}_{len(tabs)}",
    )


def youtube_embed(video_id: str):
    """
    Embed a YouTube video.

    Args:
        video_id: YouTube video ID
    """
    st.markdown(f"""
    <iframe width="100%" height="480" src="{embed_url(video_id)}"
    title="YouTube video player" frameborder="0" allow="accelerometer; autoplay; clipboard-write;
    encrypted-media; gyroscope; picture-in-picture" allowfullscreen></iframe>
    """, unsafe_allow_html=True)


def _transcript_column(record: TranscriptRecord):
    st.markdown("#### Original Transcript")
    with st.container(height=500):
        st.text(record.transcript)


def _translation_column(record: TranscriptRecord):
    st.markdown("#### বাংলা অনুবাদ")
    with st.container(height=500):
        st.text(record.translation)


def transcript_card(record: TranscriptRecord) -> Tuple[ViewTab, bool]:
    """
    Display a transcript record.

    Args:
        record: Record to display

    Returns:
        The selected tab and whether the translate button was clicked
    """
    title_col, tab_col = st.columns([3, 2])
    with title_col:
        st.markdown(f"## {record.title}")
        st.markdown(f"Channel: **{record.author}**")
    with tab_col:
        tab = tab_switcher(record)

    youtube_embed(record.video_id)

    translate_clicked = False
    if not record.translation:
        translate_clicked = st.button("Translate to Bangla", type="secondary")

    if tab == ViewTab.BOTH:
        left, right = st.columns(2)
        with left:
            _transcript_column(record)
        with right:
            _translation_column(record)
    elif tab == ViewTab.BANGLA:
        _translation_column(record)
    else:
        _transcript_column(record)

    return tab, translate_clicked


def footer():
    st.divider()
    st.caption("TubeTrans AI. Powered by Gemini.")
