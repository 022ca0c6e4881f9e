"""Unit tests for individual components in isolation.

Coverage:
    - chat/: Temperature bounds, model switching, transcript and dispatch
    - ui/: Markdown and plain-text rendering
    - agent/: Configuration and the Gemini call wrapper

Uses fakes and mocks in place of the Gemini API.
"""
