"""
Global constants for the BPDX exporters.
"""

# Exporter registration
EXPORTER_KEY_PREFIX = "buddypress-"

# Component names as reported by the host
COMPONENT_SETTINGS = "settings"
COMPONENT_ACTIVITY = "activity"
COMPONENT_XPROFILE = "xprofile"
COMPONENT_MESSAGES = "messages"
COMPONENT_GROUPS = "groups"
COMPONENT_FRIENDS = "friends"
COMPONENT_NOTIFICATIONS = "notifications"
COMPONENT_NOUVEAU = "nouveau"

# Batch sizes (records fetched per page)
ACTIVITY_BATCH_SIZE = 50
MESSAGES_BATCH_SIZE = 10
GROUPS_BATCH_SIZE = 20
FRIENDS_BATCH_SIZE = 50
NOTIFICATIONS_BATCH_SIZE = 50

# Local runner
DEFAULT_MAX_PAGES = 1000
TOOL_VERSION = "0.1.0"

# Logging constants
LOG_APP_NAME = "BPDX"
LOG_FILE_NAME = "bpdx"
LOG_RETENTION_DAYS = 7
LOG_LINES_TO_SHOW = 20

# Sensitive data keys for sanitization
SENSITIVE_KEYS = (
    "password", "token", "secret", "authorization", "api_key",
    "session", "cookie", "email", "user_pass", "activation_key",
)
