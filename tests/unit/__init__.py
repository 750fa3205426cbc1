"""Unit tests for individual components in isolation.

Coverage:
    - client/: Reducer, conversation log, session, relay client
    - relay/: Relay configuration and Agno wiring

Uses mocks or in-process transports for external services.
"""
