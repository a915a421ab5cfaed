"""
Host connectors.

Components:
- streamdeck.py: WebSocket connection to the Stream Deck host (implements HostPort)
"""
