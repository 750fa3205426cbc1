"""NiceGUI interface - thin visualization layer for the chat client.

Renders the conversation log, the send/new-chat controls, and the error
line. All chat behaviour lives in ``relaychat.client``.
"""
