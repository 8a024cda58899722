# reconciler.py
from typing import Mapping, NamedTuple, Optional

from field_labels import EXCLUDED_LABELS, FIELD_LABELS, FORCED_INPUT_LABELS, NO_VALUE


class DisplayField(NamedTuple):
    label: str
    value: str


def format_value(value) -> str:
    """Two decimals for numbers; text passes through unchanged."""
    if value is None:
        return NO_VALUE
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"{value:.2f}"
    if isinstance(value, str):
        return value
    return str(value)


def _lookup(source, label):
    """Value stored under a label or under the key it stands for."""
    if source is None:
        return None
    if label in source and source[label] is not None:
        return source[label]
    key = FIELD_LABELS.key_for(label)
    if key != label and key in source:
        return source[key]
    return None


def field_labels(form_input: Mapping, results: Optional[Mapping] = None):
    """Ordered, deduplicated labels: results first, then the input's."""
    candidates = []
    if results:
        candidates.extend(FIELD_LABELS.label_for(key) for key in results)
    candidates.extend(FIELD_LABELS.label_for(key) for key in form_input)

    seen = set()
    labels = []
    for label in candidates:
        if label in EXCLUDED_LABELS or label in seen:
            continue
        seen.add(label)
        labels.append(label)
    return labels


def resolve_value(label: str, form_input: Mapping, results: Optional[Mapping] = None) -> str:
    if label in FORCED_INPUT_LABELS:
        return format_value(_lookup(form_input, label))

    value = _lookup(results, label)
    if value is None:
        value = _lookup(form_input, label)
    return format_value(value)


def reconcile(form_input: Mapping, results: Optional[Mapping] = None):
    """
    Merge user input and service results into labeled display fields.

    Pure and total: every known label yields a field, with NO_VALUE standing
    in where neither source has data.
    """
    return [
        DisplayField(label, resolve_value(label, form_input, results))
        for label in field_labels(form_input, results)
    ]
