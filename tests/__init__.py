"""Test package for the LLM chat relay.

Structure:
    - unit/: Reducer, log persistence, session state machine, relay client
      decoding, relay service and configuration
    - integration/: The relay endpoint driven through the FastAPI app

Leverages pytest with pytest-check for soft assertions.
"""
