"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Transcript display (plain text for the user, markdown for the model)
    - Model selection and temperature controls
    - Error banner and welcome text

Holds no generation logic. Delegates sends to the chat dispatcher.
"""
