"""LLM Chat Relay - streaming chat client with a thin completion relay.

Combines FastAPI for the streaming relay endpoint, Agno for the LLM call,
NiceGUI for the chat page, and Pydantic for data validation.

Components:
    - api: HTTP endpoint that streams reply fragments as plain text
    - relay: LLM provider call and relay configuration
    - client: conversation log, reducer, and send/receive state machine
    - ui: Web interface for chat interactions
    - models: Request/response and message schemas
"""

__version__ = "0.1.0"
