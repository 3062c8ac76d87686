"""
Style resolver for inline style declarations.

Parses ``property: value`` declaration strings, converts them into a
:class:`StyleRecord` and cascades records from parent to child elements.
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional, Union

from ..exceptions import StyleError
from .style_record import (
    INHERITED_CATEGORIES,
    KEY_CATEGORIES,
    PROPERTY_RULES,
    MergePolicy,
    StyleRecord,
    merge_policy,
)

logger = logging.getLogger(__name__)

Declarations = Union[str, Mapping[str, str], None]


def parse_declarations(text: Optional[str]) -> Dict[str, str]:
    """
    Split a declaration string into an ordered property -> raw value mapping.

    Entries are separated by ``;`` and split on their first ``:``. Entries without
    a colon, or with an empty name or value, are skipped.
    """
    result: Dict[str, str] = {}
    for entry in (text or '').split(';'):
        name, colon, value = entry.partition(':')
        name = name.strip().lower()
        value = value.strip()
        if not colon or not name or not value:
            if entry.strip():
                logger.debug(f"Skipping malformed declaration {entry.strip()!r}")
            continue
        result[name] = value
    return result


def apply_value(record: StyleRecord, key: str, value) -> None:
    """Merge one converted value into ``record`` using the key's merge policy."""
    policy = merge_policy(key)
    if policy is MergePolicy.ACCUMULATE:
        setattr(record, key, (record.get(key) or 0.0) + value)
    elif policy is MergePolicy.APPEND:
        if value is not None and value not in record.styles:
            record.styles.append(value)
    else:
        setattr(record, key, value)


def resolve(declarations: Declarations, existing: Optional[StyleRecord] = None) -> StyleRecord:
    """
    Resolve declarations on top of an existing record.

    Args:
        declarations: Declaration string or already parsed mapping
        existing: Record to merge into; it is not modified

    Returns:
        New style record
    """
    if isinstance(declarations, str) or declarations is None:
        declarations = parse_declarations(declarations)
    elif not isinstance(declarations, Mapping):
        raise StyleError("Declarations must be a string or a mapping", details=type(declarations).__name__)

    record = existing.copy() if existing is not None else StyleRecord()
    for name, raw_value in declarations.items():
        rule = PROPERTY_RULES.get(name)
        if rule is None:
            logger.debug(f"Ignoring unsupported style property {name!r}")
            continue
        apply_value(record, rule.key, rule.converter(raw_value))
    return record


def cascade(parent: Optional[StyleRecord], own: StyleRecord) -> StyleRecord:
    """
    Compute an element's effective style from its parent's effective style.

    Text-node and block keys are inherited; tag-open and tag-close keys only ever
    come from the element itself.
    """
    record = StyleRecord()
    if parent is not None:
        for key in parent.set_keys():
            if KEY_CATEGORIES[key] in INHERITED_CATEGORIES:
                value = parent.get(key)
                setattr(record, key, list(value) if isinstance(value, list) else value)

    for key in own.set_keys():
        value = own.get(key)
        if isinstance(value, list):
            for token in value:
                apply_value(record, key, token)
        else:
            apply_value(record, key, value)
    return record
