"""
Icon rendering.

Components:
- color_policy.py: count + threshold ladders -> background color
- icon.py: SVG composition and the data URI handed to the host
"""
