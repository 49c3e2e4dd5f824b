"""Global configuration for reorderable row containers.

Applications set this once at startup; containers read it when constructed.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class RowListConfig:
    """Configuration for row list behavior and appearance.

    Attributes:
        indicator_thickness: Height in pixels of the insertion bar
        handle_text: Glyph shown in each row's drag handle
        handle_margin: Horizontal padding around the handle glyph
        selection_visible: Whether new containers show selection checkboxes
        row_spacing: Vertical spacing between rows in the container layout
        drag_pixmap_max_width: Drag preview pixmaps wider than this are scaled down
        color_scheme_path: Optional JSON file with ColorScheme overrides
    """

    indicator_thickness: int = 4
    handle_text: str = "☰"
    handle_margin: int = 5
    selection_visible: bool = False
    row_spacing: int = 0
    drag_pixmap_max_width: int = 400
    color_scheme_path: Optional[str] = None


# Global config instance (set by application)
_row_list_config: Optional[RowListConfig] = None


def set_row_list_config(config: Optional[RowListConfig]) -> None:
    """Set the global row list configuration.

    Args:
        config: RowListConfig instance, or None to restore defaults
    """
    global _row_list_config
    _row_list_config = config


def get_row_list_config() -> RowListConfig:
    """Get the current row list configuration.

    Returns:
        Current RowListConfig or default if not set
    """
    if _row_list_config is None:
        return RowListConfig()
    return _row_list_config
