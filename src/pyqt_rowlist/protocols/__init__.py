"""
Listener contracts and configuration.

ABC-based observer contract plus the application-wide configuration hook.
"""

from .change_listener import ChangeListener, CallbackListener
from .list_config import RowListConfig, set_row_list_config, get_row_list_config

__all__ = [
    "ChangeListener",
    "CallbackListener",
    "RowListConfig",
    "set_row_list_config",
    "get_row_list_config",
]
