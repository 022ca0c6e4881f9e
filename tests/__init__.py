"""Test package for Gemini Chat.

Structure:
    - unit/: Chat state, dispatch, formatting and agent service tests
    - integration/: JSON endpoints through the real FastAPI app

The Gemini call is always mocked. Uses pytest with pytest-check for soft
assertions.
"""
