"""
Core functionality for the TubeTrans application.

This package contains modules for recognising YouTube links, talking to the
Gemini backend, and driving the viewer state.
"""
