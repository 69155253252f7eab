"""
TubeTrans: YouTube transcripts translated to Bangla.

This application asks a Gemini model to reconstruct the transcript of a
YouTube video and optionally translates it into Bangla.
"""

from tubetrans.config import config

__version__ = config.APP_VERSION
