"""
Styles module: value converters, the style record and the cascade resolver.
"""

from .converters import (
    convert_color,
    convert_float,
    convert_size,
    convert_symbol,
    copy_value,
    normalize_style,
    unquote,
)
from .style_record import (
    KEY_CATEGORIES,
    PROPERTY_RULES,
    MergePolicy,
    StyleCategory,
    StyleRecord,
    StyleRule,
)
from .style_resolver import cascade, parse_declarations, resolve

__all__ = [
    "convert_color",
    "convert_float",
    "convert_size",
    "convert_symbol",
    "copy_value",
    "normalize_style",
    "unquote",
    "KEY_CATEGORIES",
    "PROPERTY_RULES",
    "MergePolicy",
    "StyleCategory",
    "StyleRecord",
    "StyleRule",
    "cascade",
    "parse_declarations",
    "resolve",
]
