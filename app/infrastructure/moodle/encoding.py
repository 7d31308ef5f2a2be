"""
Form encoding for Moodle web-service arguments.

Moodle's REST server expects nested arguments flattened into bracket
notation, e.g. ``users[0][username]=jdoe``. None values are dropped and
booleans are sent as 1/0.
"""

from typing import Any


def encode_params(value: Any, prefix: str = "") -> dict[str, str]:
    """Flatten nested dicts and lists into Moodle form fields.

    Args:
        value: A dict at the top level; dicts, lists or scalars below it.
        prefix: Key prefix accumulated during recursion.

    Returns:
        A flat mapping of bracketed keys to string values.
    """
    fields: dict[str, str] = {}

    if isinstance(value, dict):
        for key, item in value.items():
            name = f"{prefix}[{key}]" if prefix else str(key)
            fields.update(encode_params(item, name))
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            fields.update(encode_params(item, f"{prefix}[{index}]"))
    elif value is None:
        pass
    elif isinstance(value, bool):
        fields[prefix] = "1" if value else "0"
    else:
        fields[prefix] = str(value)

    return fields
