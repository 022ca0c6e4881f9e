"""Integration tests for components working together as a system.

Coverage:
    - JSON endpoints with real HTTP requests against the ASGI app
    - Request validation, temperature clamping and error collapsing

Agno's Agent is patched so no network access or API key is required.
"""
