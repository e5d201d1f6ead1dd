"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"

# Container IDs
HEADER_CONTAINER = "header-container"
HEADER_TITLE = "header-title"
BACKEND_LABEL = "backend-label"
MAIN_TABS = "main-tabs"
FOOTER_BUTTONS = "footer-buttons"
STATUS_BAR = "status-bar"
QUIT_BTN = "quit-btn"

# Status tab IDs
STATUS_TAB_CONTENT = "status-tab-content"
SYSTEM_INFO = "system-info"
STORAGE_INFO = "storage-info"
DEVICE_INFO = "device-info"
HYMOFS_INFO = "hymofs-info"
ACCENT_SWATCH = "accent-swatch"
VERSION_LABEL = "version-label"
REFRESH_STATUS_BTN = "refresh-status-btn"
REBOOT_BTN = "reboot-btn"
UNLOAD_HYMOFS_BTN = "unload-hymofs-btn"

# Config tab IDs
CONFIG_TAB_CONTENT = "config-tab-content"
CONFIG_BUTTONS_ROW = "config-buttons-row"
OPT_MODULEDIR = "opt-moduledir"
OPT_MOUNTSOURCE = "opt-mountsource"
OPT_PARTITIONS = "opt-partitions"
OPT_OVERLAY_MODE = "opt-overlay-mode"
OPT_DISABLE_UMOUNT = "opt-disable-umount"
OPT_ALLOW_COEXISTENCE = "opt-allow-coexistence"
OPT_LOGFILE = "opt-logfile"
OPT_HYMOFS_DEBUG = "opt-hymofs-debug"
OPT_HYMOFS_STEALTH = "opt-hymofs-stealth"
SAVE_CONFIG_BTN = "save-config-btn"
RELOAD_CONFIG_BTN = "reload-config-btn"
RESET_CONFIG_BTN = "reset-config-btn"
DIRTY_INDICATOR = "dirty-indicator"

# Modules tab IDs
MODULES_TAB_CONTENT = "modules-tab-content"
MODULES_TABLE = "modules-table"
MODULES_HINT = "modules-hint"
REFRESH_MODULES_BTN = "refresh-modules-btn"

# Logs tab IDs
LOGS_TAB_CONTENT = "logs-tab-content"
LOGS_SCROLL = "logs-scroll"
LOGS_VIEW = "logs-view"
REFRESH_LOGS_BTN = "refresh-logs-btn"

# Rules modal IDs
RULES_MODAL = "rules-modal"
RULES_DEFAULT_MODE = "rules-default-mode"
RULES_PATHS_LIST = "rules-paths-list"
RULE_PATH_INPUT = "rule-path-input"
RULE_MODE_SELECT = "rule-mode-select"
ADD_RULE_BTN = "add-rule-btn"
RULES_SAVE_BTN = "rules-save-btn"
RULES_CANCEL_BTN = "rules-cancel-btn"

# Confirm modal IDs
CONFIRM_MODAL = "confirm-modal"
CONFIRM_YES_BTN = "confirm-yes-btn"
CONFIRM_NO_BTN = "confirm-no-btn"
