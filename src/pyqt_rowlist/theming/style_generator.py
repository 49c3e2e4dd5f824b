"""
QStyleSheet generator for reorderable rows.

Builds row and handle stylesheets from a ColorScheme so the bevelled row
look is driven by semantic colors instead of hardcoded strings.
"""

from .color_scheme import ColorScheme


class StyleSheetGenerator:
    """Generates QStyleSheet strings for row list widgets."""

    def __init__(self, color_scheme: ColorScheme):
        self.color_scheme = color_scheme

    def generate_row_style(self) -> str:
        """
        Generate QStyleSheet for a ReorderableRow and its content frame.

        The row gets a raised edge, the content frame a lowered one.

        Returns:
            str: QStyleSheet for row styling
        """
        cs = self.color_scheme
        return f"""
            ReorderableRow {{
                background-color: {cs.to_hex(cs.row_bg)};
                border-top: 1px solid {cs.to_hex(cs.border_light)};
                border-left: 1px solid {cs.to_hex(cs.border_light)};
                border-bottom: 1px solid {cs.to_hex(cs.border_color)};
                border-right: 1px solid {cs.to_hex(cs.border_color)};
            }}
            ReorderableRow:hover {{
                background-color: {cs.to_hex(cs.hover_bg)};
            }}
            QFrame#rowContent {{
                border-top: 1px solid {cs.to_hex(cs.border_color)};
                border-left: 1px solid {cs.to_hex(cs.border_color)};
                border-bottom: 1px solid {cs.to_hex(cs.border_light)};
                border-right: 1px solid {cs.to_hex(cs.border_light)};
            }}
            QCheckBox {{
                color: {cs.to_hex(cs.text_primary)};
            }}
            QCheckBox:disabled {{
                color: {cs.to_hex(cs.text_disabled)};
            }}
        """

    def generate_handle_style(self, margin: int = 5) -> str:
        """
        Generate QStyleSheet for a row's drag handle label.

        Args:
            margin: Horizontal padding in pixels on each side of the glyph
        """
        cs = self.color_scheme
        return f"""
            QLabel {{
                color: {cs.to_hex(cs.handle_text)};
                padding: 0px {margin}px 0px {margin}px;
                background: transparent;
            }}
        """

    def generate_container_style(self) -> str:
        """Generate QStyleSheet for the container background."""
        cs = self.color_scheme
        return f"""
            ReorderableRowContainer {{
                background-color: {cs.to_hex(cs.panel_bg)};
            }}
        """
