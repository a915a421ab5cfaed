# config.example.py

"""
Documentation-only module (safe to commit).

The plugin reads its configuration from environment variables (optionally via a
local .env file next to the plugin). Every variable has a default, so the host can
launch the plugin with no environment at all.

The Todoist API token is NOT configured here: it is a global plugin setting
(`apiToken`) entered once in the property inspector and stored by the host.
"""

ENV_VARS = {
    # App / logging
    "TODOIST_DECK_APP_NAME": "Name used in log lines (default: todoist-deck).",
    "TODOIST_DECK_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    "TODOIST_DECK_DATA_DIR": "Directory for plugin.log (default: .local/todoist_deck).",
    # Todoist
    "TODOIST_DECK_API_BASE_URL": "Todoist REST base URL (default: https://api.todoist.com/rest/v2).",
    # Buttons
    "TODOIST_DECK_REFRESH_INTERVAL_SECONDS": "Seconds between refreshes of a visible key (default: 60, min 1).",
    "TODOIST_DECK_ACTION_UUID": (
        "Action UUID from the plugin manifest (default: com.johnlong.todoiststatus.counts)."
    ),
    # Host connection
    "TODOIST_DECK_HOST_REPLY_TIMEOUT_SECONDS": (
        "Seconds to wait for the host to answer getSettings/getGlobalSettings (default: 5)."
    ),
}
