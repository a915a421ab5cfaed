"""
todoist-deck: a Stream Deck key that shows how many Todoist tasks match a filter.

Subsystems:
- core/: settings models, host message variants, ports
- monitor/: per-button timers, refresh pipeline, lifecycle routing
- todoist/: REST client
- render/: color policy and SVG icon
- connectors/: host WebSocket connector
- cli/: entrypoint and wiring
"""
