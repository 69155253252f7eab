"""
Main Streamlit application for TubeTrans.
"""

import asyncio

import streamlit as st
from dotenv import load_dotenv

from tubetrans.core.ai_client import GeminiClient
from tubetrans.core.orchestrator import TranscriptOrchestrator
from tubetrans.core.session import TranscriptSession
from tubetrans.frontend.components import (
    header, youtube_input, feature_cards, display_error,
    transcript_card, footer
)
from tubetrans.models.schemas import AppStatus


load_dotenv()


def init_session_state():
    """Initialize session state variables."""
    if "notifications" not in st.session_state:
        st.session_state.notifications = []

    if "event_loop" not in st.session_state:
        # One loop per viewer so the SDK's async transport is reused across reruns
        st.session_state.event_loop = asyncio.new_event_loop()

    if "transcript_session" not in st.session_state:
        session = TranscriptSession(TranscriptOrchestrator(GeminiClient()))
        session.subscribe(st.session_state.notifications.append)
        st.session_state.transcript_session = session


def run_async(coro):
    return st.session_state.event_loop.run_until_complete(coro)


def show_notifications():
    """Show notifications queued during the previous run."""
    while st.session_state.notifications:
        notification = st.session_state.notifications.pop(0)
        icon = "⚠️" if notification.level == "error" else "ℹ️"
        st.toast(notification.message, icon=icon)


def main():
    """Main application entry point."""
    header()
    init_session_state()
    show_notifications()

    session: TranscriptSession = st.session_state.transcript_session

    url = youtube_input()
    if url:
        with st.spinner("Generating transcript..."):
            run_async(session.submit(url))

    state = session.state

    if state.status == AppStatus.ERROR:
        display_error(state.error_message)

    elif state.status == AppStatus.SUCCESS:
        _, translate_clicked = transcript_card(state.record)
        if translate_clicked:
            with st.spinner("Translating to Bangla..."):
                run_async(session.request_translation())
            st.rerun()

    elif state.status == AppStatus.IDLE:
        feature_cards()

    footer()


if __name__ == "__main__":
    main()
