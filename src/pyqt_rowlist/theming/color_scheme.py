"""
Color scheme for reorderable row lists.

Centralized color management for rows, handles, and the insertion indicator,
with dark/light variants and JSON configuration.
"""

import json
import logging
from dataclasses import dataclass
from typing import Tuple, Dict
from pathlib import Path
from PyQt6.QtGui import QColor

logger = logging.getLogger(__name__)


def _is_rgb(value) -> bool:
    """True for a list of three ints in 0..255 (bools excluded)."""
    return (
        isinstance(value, list)
        and len(value) == 3
        and all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in value)
    )


@dataclass
class ColorScheme:
    """
    Semantic colors used by ReorderableRowContainer and ReorderableRow.

    Defaults target dark backgrounds; use create_light_theme() for light ones.
    """

    # Container and row backgrounds
    panel_bg: Tuple[int, int, int] = (30, 30, 30)       # #1e1e1e
    row_bg: Tuple[int, int, int] = (43, 43, 43)         # #2b2b2b
    hover_bg: Tuple[int, int, int] = (51, 51, 51)       # #333333

    # Row bevel borders
    border_color: Tuple[int, int, int] = (85, 85, 85)   # #555555 - lowered (content) edge
    border_light: Tuple[int, int, int] = (102, 102, 102) # #666666 - raised (row) edge

    # Text
    text_primary: Tuple[int, int, int] = (255, 255, 255)
    text_disabled: Tuple[int, int, int] = (102, 102, 102)
    handle_text: Tuple[int, int, int] = (204, 204, 204)  # #cccccc

    # Insertion line drawn during a drag
    drop_indicator: Tuple[int, int, int] = (0, 120, 212)  # #0078d4

    def to_qcolor(self, color_tuple: Tuple[int, int, int]) -> QColor:
        """
        Convert RGB tuple to QColor object.

        Args:
            color_tuple: RGB color tuple (r, g, b)

        Returns:
            QColor: Qt color object
        """
        return QColor(*color_tuple)

    def to_hex(self, color_tuple: Tuple[int, int, int]) -> str:
        """Convert RGB tuple to a "#rrggbb" string."""
        r, g, b = color_tuple
        return f"#{r:02x}{g:02x}{b:02x}"

    @classmethod
    def create_dark_theme(cls) -> 'ColorScheme':
        """Dark variant; the defaults with a brighter indicator."""
        return cls(drop_indicator=(0, 170, 255))

    @classmethod
    def create_light_theme(cls) -> 'ColorScheme':
        """
        Create a light theme variant with adjusted colors for light backgrounds.

        Returns:
            ColorScheme: Light theme color scheme
        """
        return cls(
            panel_bg=(245, 245, 245),
            row_bg=(255, 255, 255),
            hover_bg=(240, 240, 240),
            border_color=(180, 180, 180),
            border_light=(160, 160, 160),
            text_primary=(0, 0, 0),
            text_disabled=(160, 160, 160),
            handle_text=(80, 80, 80),
            drop_indicator=(0, 0, 255),     # Plain blue
        )

    @classmethod
    def load_color_scheme_from_config(cls, config_path: str = None) -> 'ColorScheme':
        """
        Load color scheme from external configuration file.

        Unknown keys and values that are not RGB lists are ignored.

        Args:
            config_path: Path to JSON config file (optional)

        Returns:
            ColorScheme: Loaded color scheme or default if file not found
        """
        if config_path and Path(config_path).exists():
            try:
                with open(config_path, 'r') as f:
                    config = json.load(f)

                scheme_kwargs = {}
                for key, value in config.items():
                    if key not in cls.__dataclass_fields__:
                        continue
                    if _is_rgb(value):
                        scheme_kwargs[key] = tuple(value)
                    else:
                        logger.warning(f"Ignoring invalid color {key}={value!r} in {config_path}")

                return cls(**scheme_kwargs)

            except (OSError, ValueError, AttributeError) as e:
                logger.warning(f"Failed to load color scheme from {config_path}: {e}")

        return cls()

    def get_color_dict(self) -> Dict[str, Tuple[int, int, int]]:
        """
        Get all colors as a dictionary for serialization or inspection.

        Returns:
            Dict[str, Tuple[int, int, int]]: Dictionary of color name to RGB tuple
        """
        return {name: getattr(self, name) for name in self.__dataclass_fields__}

    def save_to_json(self, config_path: str) -> bool:
        """
        Save color scheme to JSON configuration file.

        Args:
            config_path: Path to save JSON config file

        Returns:
            bool: True if save successful, False otherwise
        """
        try:
            json_dict = {k: list(v) for k, v in self.get_color_dict().items()}

            with open(config_path, 'w') as f:
                json.dump(json_dict, f, indent=2, sort_keys=True)

            logger.info(f"Color scheme saved to {config_path}")
            return True

        except OSError as e:
            logger.error(f"Failed to save color scheme to {config_path}: {e}")
            return False
