"""
util/jsonfmt.py

JSON text helpers used for log lines and outputs.
"""

import json


def to_json(value, indent=2):
    return json.dumps(value, indent=indent, default=str, ensure_ascii=False)


def extract_id(text):
    """Return the top-level 'id' of a JSON object body as a string.

    Raises ValueError when the body is not JSON; returns "" when it parses
    but has no usable id.
    """
    parsed = json.loads(text)
    if not isinstance(parsed, dict):
        return ""
    value = parsed.get("id")
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)
