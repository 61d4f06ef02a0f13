"""
CSS generator for Figma variables.

Groups normalized variables into categories and renders them as CSS custom
properties inside a single ``:root`` block:

    :root {
      /* Colors */
      --color-primary: #FF0000;

      /* Typography */
      --font-size-large: 24px;
    }
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .models import Variable, VariableGroup, VariableValue
from .scopes import SCOPE_CATEGORIES, SCOPE_PREFIXES, SIZE_SCOPES, SIZE_UNIT, VariableScope

# Mode name used when the caller does not ask for a specific mode
DEFAULT_MODE = "default"

_WHITESPACE = re.compile(r"\s+")

# CSS <number> token: no underscores, no inf/nan
_CSS_NUMBER = re.compile(r"[+-]?(\d+(\.\d+)?|\.\d+)([eE][+-]?\d+)?")


# =============================================================================
# Categorization and grouping
# =============================================================================


def get_variable_category(name: str, scope: VariableScope) -> str:
    """
    Get the stylesheet category for a variable.

    A folder path in the Figma name wins ("Colors/Primary" -> "Colors").
    Names without a folder, or with a blank one, are classified by scope.
    """
    parts = name.split("/")
    if len(parts) > 1 and parts[0].strip():
        return parts[0]
    return str(SCOPE_CATEGORIES[scope])


def group_variables(variables: Iterable[Variable]) -> list[VariableGroup]:
    """
    Partition variables by category.

    Groups are sorted by name; variables keep their input order within a group.
    """
    groups: dict[str, list[Variable]] = {}
    for variable in variables:
        category = get_variable_category(variable.name, variable.scope)
        groups.setdefault(category, []).append(variable)

    return [VariableGroup(name=name, variables=groups[name]) for name in sorted(groups)]


# =============================================================================
# Formatting
# =============================================================================


def format_variable_name(name: str, scope: VariableScope) -> str:
    """
    Build the CSS custom property name for a variable.

    The leading folder is dropped (it is already the category comment) and so
    are "Size" segments, which repeat the size-like prefixes.

    Examples:
        ("Colors/Primary", ALL_FILLS) -> "--color-primary"
        ("Typography/Size/Large", FONT_SIZE) -> "--font-size-large"
    """
    prefix = SCOPE_PREFIXES[scope]

    parts = name.split("/")
    relevant = [part for part in parts[1:] if part.lower() != "size"]
    name_without_category = "-".join(relevant) if relevant else parts[-1]

    formatted = _WHITESPACE.sub("-", name_without_category.lower()).replace("/", "-")

    # An empty prefix (ALL_SCOPES) still yields "---name"; consumers rely on it.
    return f"--{prefix}-{formatted}"


def _stringify(value: int | float | str) -> str:
    """Render a value the way it prints in the design tool (24.0 -> "24")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_css_number(value: str) -> bool:
    return _CSS_NUMBER.fullmatch(value) is not None


def format_variable_value(value: int | float | str, scope: VariableScope) -> str:
    """
    Render a variable value as a CSS literal.

    Size-like scopes get a ``px`` unit when the value is numeric; anything
    else passes through as its string form.
    """
    if scope in SIZE_SCOPES:
        if isinstance(value, int | float):
            return f"{_stringify(value)}{SIZE_UNIT}"
        text = value.strip()
        if _is_css_number(text):
            return f"{text}{SIZE_UNIT}"
        return value
    return _stringify(value)


# =============================================================================
# Emission
# =============================================================================


def _declaration(variable: Variable, mode: str, indent: str) -> str | None:
    value: VariableValue = variable.value_for_mode(mode)
    if value is None or value == "":
        return None
    name = format_variable_name(variable.name, variable.scope)
    return f"{indent}{name}: {format_variable_value(value, variable.scope)};"


def generate_css(
    variables: Iterable[Variable],
    mode: str = DEFAULT_MODE,
    *,
    wrap_in_root: bool = True,
) -> str:
    """
    Generate a stylesheet from normalized variables.

    Hidden variables are dropped before grouping, so a category made only of
    hidden variables produces no comment either. Declarations whose value is
    missing for ``mode`` are skipped.

    Args:
        variables: Normalized variables
        mode: Mode name whose overrides take precedence over resolved values
        wrap_in_root: Wrap the declarations in a ``:root`` block

    Returns:
        CSS string
    """
    indent = "  "
    visible = [variable for variable in variables if not variable.hidden]

    blocks: list[str] = []
    for group in group_variables(visible):
        lines = [f"{indent}/* {group.name} */"]
        for variable in group.variables:
            declaration = _declaration(variable, mode, indent)
            if declaration is not None:
                lines.append(declaration)
        blocks.append("\n".join(lines))

    body = "\n\n".join(blocks)
    if not wrap_in_root:
        return body
    if not body:
        return ":root {\n}"
    return f":root {{\n{body}\n}}"
