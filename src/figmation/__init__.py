"""
Figmation - Figma variables to CSS custom properties.

Fetches a Figma file's local variables and writes them as a grouped
``:root`` stylesheet.
"""

from __future__ import annotations

from ._version import get_version
from .config import FigmationConfig, load_config
from .css_generator import (
    DEFAULT_MODE,
    format_variable_name,
    format_variable_value,
    generate_css,
    get_variable_category,
    group_variables,
)
from .errors import ConfigurationError, FigmaAuthError, FigmationError
from .figma_client import FigmaClient
from .generator import Figmation
from .models import FigmaVariable, FigmaVariableCollection, Variable, VariableGroup
from .normalize import normalize_collections, normalize_variable, resolve_scope
from .scopes import SCOPE_PREFIXES, VariableScope

__version__ = get_version()

__all__ = [
    "__version__",
    "DEFAULT_MODE",
    "SCOPE_PREFIXES",
    # Facade
    "Figmation",
    "FigmationConfig",
    "load_config",
    "FigmaClient",
    # Models
    "FigmaVariable",
    "FigmaVariableCollection",
    "Variable",
    "VariableGroup",
    "VariableScope",
    # Pipeline
    "resolve_scope",
    "normalize_variable",
    "normalize_collections",
    "get_variable_category",
    "group_variables",
    "format_variable_name",
    "format_variable_value",
    "generate_css",
    # Errors
    "FigmationError",
    "ConfigurationError",
    "FigmaAuthError",
]
