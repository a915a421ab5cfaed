"""
Core types shared by every subsystem.

Components:
- models.py: ButtonConfig, Ladder, GlobalCredentials (typed views of host settings)
- events.py: inbound host messages (Appear, Disappear, SettingsChanged, KeyPressed)
- ports.py: HostPort and TaskCounter protocols
"""
