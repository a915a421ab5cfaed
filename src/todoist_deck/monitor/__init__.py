"""
Button monitor subsystem.

Components:
- poller.py: one refresh timer per visible button instance
- pipeline.py: settings -> count -> icon -> host, one refresh at a time
- action.py: routes host lifecycle messages to the poller and pipeline
"""
