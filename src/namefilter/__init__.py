"""namefilter - Pattern predicates for filtering fully qualified names."""

from __future__ import annotations

# Predicates
from namefilter.predicates import (
    Predicate,
    and_,
    PatternAlternative,
    parse_pattern,
    conjunction,
    disjunction,
    negate,
    not_,
    or_,
    string_contains,
)

# Filters
from namefilter.filters import FilterRule, NameFilter

# Config
from namefilter.config import Config

# Errors
from namefilter.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    FilterRuleError,
    NameFilterError,
)

__version__ = "0.1.0"

__all__ = [
    # Predicates
    "Predicate",
    "string_contains",
    "PatternAlternative",
    "parse_pattern",
    "negate",
    "conjunction",
    "disjunction",
    "not_",
    "and_",
    "or_",
    # Filters
    "FilterRule",
    "NameFilter",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "NameFilterError",
    "ConfigNotFoundError",
    "ConfigError",
    "FilterRuleError",
]
