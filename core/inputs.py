"""
core/inputs.py

Turn raw action inputs into a RequestConfig.
- parse_header_lines: 'name: value' lines into a mapping, tolerant of junk
- parse_int_input / parse_bool_input: coercion rules for scalar inputs
- read_config: pull every input from the pipeline context
"""

from core.models import RequestConfig
from util.jsonfmt import to_json
from util.logs import get_logger


logger = get_logger(__name__)

TRUE_VALUES = {"true", "True", "TRUE"}
FALSE_VALUES = {"false", "False", "FALSE"}


class InputError(ValueError):
    """An action input is missing or cannot be interpreted."""


def parse_header_lines(lines):
    """Build a header mapping from 'name: value' lines.

    Split happens on the first colon only, both sides trimmed. A line with no
    colon becomes a header with an empty value; nothing is validated.
    """
    headers: dict[str, str] = {}
    for line in lines:
        if not line.strip():
            continue
        name, _, value = line.partition(":")
        headers[name.strip()] = value.strip()
    return headers


def parse_int_input(name, value):
    value = (value or "").strip()
    if not value:
        return 0
    # Decimal integers only: "1.5", "1e2" and "0x10" are treated as non-numeric
    try:
        return int(value)
    except ValueError:
        # Non-numeric: no retries and no delay
        logger.warning("Ignoring non-numeric input", input=name, value=value)
        return 0


def parse_bool_input(name, value):
    value = (value or "").strip()
    if not value:
        return False
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise InputError(
        f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


def read_config(context):
    """Read all inputs from the context and log the resulting config."""
    url = context.get_input("url", required=True)
    if not url:
        raise InputError("Input required and not supplied: url")

    config = RequestConfig(
        url=url,
        method=(context.get_input("method") or "GET").upper(),
        headers=parse_header_lines(context.get_multiline_input("headers")),
        body=context.get_input("body") or None,
        retry_count=parse_int_input("retry-count", context.get_input("retry-count")),
        retry_delay=parse_int_input("retry-delay", context.get_input("retry-delay")),
        fail_on_error=context.get_boolean_input("fail-on-error"),
    )
    context.info(f"Inputs: {to_json(config.to_dict())}")
    return config
