"""
Variable scopes and the lookup tables keyed on them.

Figma attaches zero or more scope tags to every variable. Figmation resolves
each variable to exactly one ``VariableScope`` and everything downstream
(CSS prefix, category, unit) is a plain table lookup on that member.
Each table covers the full enumeration.
"""

from __future__ import annotations

from enum import StrEnum

# =============================================================================
# Enums
# =============================================================================


class VariableScope(StrEnum):
    """Closed set of Figma variable scopes."""

    ALL_SCOPES = "ALL_SCOPES"
    TEXT_CONTENT = "TEXT_CONTENT"
    CORNER_RADIUS = "CORNER_RADIUS"
    WIDTH_HEIGHT = "WIDTH_HEIGHT"
    GAP = "GAP"
    ALL_FILLS = "ALL_FILLS"
    FRAME_FILL = "FRAME_FILL"
    SHAPE_FILL = "SHAPE_FILL"
    TEXT_FILL = "TEXT_FILL"
    STROKE_COLOR = "STROKE_COLOR"
    EFFECT_COLOR = "EFFECT_COLOR"
    STROKE_FLOAT = "STROKE_FLOAT"
    EFFECT_FLOAT = "EFFECT_FLOAT"
    OPACITY = "OPACITY"
    FONT_FAMILY = "FONT_FAMILY"
    FONT_STYLE = "FONT_STYLE"
    FONT_WEIGHT = "FONT_WEIGHT"
    FONT_SIZE = "FONT_SIZE"
    LINE_HEIGHT = "LINE_HEIGHT"
    LETTER_SPACING = "LETTER_SPACING"
    PARAGRAPH_SPACING = "PARAGRAPH_SPACING"
    PARAGRAPH_INDENT = "PARAGRAPH_INDENT"


class Category(StrEnum):
    """Stylesheet section a variable lands in when its name has no folder."""

    COLORS = "Colors"
    TYPOGRAPHY = "Typography"
    LAYOUT = "Layout"
    OTHER = "Other"


# Scope used when none of a variable's tags is recognised
DEFAULT_SCOPE = VariableScope.ALL_FILLS


# =============================================================================
# Lookup tables
# =============================================================================

# CSS custom-property prefix per scope
SCOPE_PREFIXES: dict[VariableScope, str] = {
    VariableScope.ALL_SCOPES: "",
    VariableScope.TEXT_CONTENT: "text",
    VariableScope.CORNER_RADIUS: "border-radius",
    VariableScope.WIDTH_HEIGHT: "size",
    VariableScope.GAP: "gap",
    # Every fill and color scope shares the "color" prefix
    VariableScope.ALL_FILLS: "color",
    VariableScope.FRAME_FILL: "color",
    VariableScope.SHAPE_FILL: "color",
    VariableScope.TEXT_FILL: "color",
    VariableScope.STROKE_COLOR: "color",
    VariableScope.EFFECT_COLOR: "color",
    # Typography
    VariableScope.FONT_FAMILY: "font-family",
    VariableScope.FONT_STYLE: "font-style",
    VariableScope.FONT_WEIGHT: "font-weight",
    VariableScope.FONT_SIZE: "font-size",
    VariableScope.LINE_HEIGHT: "line-height",
    VariableScope.LETTER_SPACING: "letter-spacing",
    VariableScope.PARAGRAPH_SPACING: "paragraph",
    VariableScope.PARAGRAPH_INDENT: "indent",
    # Other
    VariableScope.STROKE_FLOAT: "border",
    VariableScope.EFFECT_FLOAT: "effect",
    VariableScope.OPACITY: "opacity",
}

SCOPE_CATEGORIES: dict[VariableScope, Category] = {
    VariableScope.ALL_FILLS: Category.COLORS,
    VariableScope.FRAME_FILL: Category.COLORS,
    VariableScope.SHAPE_FILL: Category.COLORS,
    VariableScope.TEXT_FILL: Category.COLORS,
    VariableScope.STROKE_COLOR: Category.COLORS,
    VariableScope.EFFECT_COLOR: Category.COLORS,
    VariableScope.FONT_FAMILY: Category.TYPOGRAPHY,
    VariableScope.FONT_WEIGHT: Category.TYPOGRAPHY,
    VariableScope.FONT_SIZE: Category.TYPOGRAPHY,
    VariableScope.LINE_HEIGHT: Category.TYPOGRAPHY,
    VariableScope.LETTER_SPACING: Category.TYPOGRAPHY,
    VariableScope.PARAGRAPH_SPACING: Category.TYPOGRAPHY,
    VariableScope.PARAGRAPH_INDENT: Category.TYPOGRAPHY,
    VariableScope.CORNER_RADIUS: Category.LAYOUT,
    VariableScope.WIDTH_HEIGHT: Category.LAYOUT,
    VariableScope.GAP: Category.LAYOUT,
    VariableScope.ALL_SCOPES: Category.OTHER,
    VariableScope.TEXT_CONTENT: Category.OTHER,
    VariableScope.STROKE_FLOAT: Category.OTHER,
    VariableScope.EFFECT_FLOAT: Category.OTHER,
    VariableScope.OPACITY: Category.OTHER,
    VariableScope.FONT_STYLE: Category.OTHER,
}

# Scopes whose numeric values get a px unit
SIZE_SCOPES: frozenset[VariableScope] = frozenset(
    {
        VariableScope.FONT_SIZE,
        VariableScope.LINE_HEIGHT,
        VariableScope.LETTER_SPACING,
        VariableScope.PARAGRAPH_SPACING,
        VariableScope.PARAGRAPH_INDENT,
        VariableScope.CORNER_RADIUS,
        VariableScope.GAP,
    }
)

SIZE_UNIT = "px"


def is_valid_scope(scope: str) -> bool:
    """Check whether a raw scope tag is a known ``VariableScope``."""
    return scope in VariableScope.__members__
