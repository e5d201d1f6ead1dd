"""Controller layer: mediates between UI widgets and the client.

This package contains:
- sync: ConfigSyncManager for UI <-> AppConfig sync, ConfigSnapshot for dirty tracking
- Event handler mixins for the status, config and modules tabs
"""

from controller.sync import ConfigSnapshot, ConfigSyncManager, FieldMapping, FIELD_MAPPINGS
from controller.config import CONFIG_WIDGET_IDS, ConfigEventsMixin
from controller.modules import ModuleEventsMixin, summarize_rules
from controller.status import StatusEventsMixin

__all__ = [
    # Sync
    "ConfigSnapshot",
    "ConfigSyncManager",
    "FieldMapping",
    "FIELD_MAPPINGS",
    # Event mixins
    "CONFIG_WIDGET_IDS",
    "ConfigEventsMixin",
    "ModuleEventsMixin",
    "StatusEventsMixin",
    "summarize_rules",
]
