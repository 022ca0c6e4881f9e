"""Gemini Chat - browser chat interface for Google's Gemini models.

Combines NiceGUI for the chat page, FastAPI as the hosting server and JSON API,
Agno for the Gemini model call, and Pydantic for data validation.

Components:
    - agent: Gemini generation service and its configuration
    - chat: Conversation state, temperature bounds and request dispatch
    - api: Health check and JSON chat endpoints
    - ui: Web interface for chat interactions
    - models: Message and request/response schemas
"""

__version__ = "0.1.0"
