"""Integration tests for the relay endpoint and the client against it.

The provider is replaced by a scripted relay service unless an API key is
configured, in which case the live tests also run.
"""
