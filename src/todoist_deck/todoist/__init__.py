"""
Todoist REST access.

Components:
- client.py: TodoistClient (task count for a filter) and RemoteQueryError
"""
