"""Directive parsing for the first line of a LESS file.

A directive is a line comment of comma separated ``key: value`` pairs::

    // out: ../css/site.css, sourceMap: true, autoprefixer: last 2 versions

Values that are exactly ``true``, ``false``, ``null``, ``undefined`` or a run
of digits become native values; anything else stays a string.
"""

import re
from typing import Any, Dict

DIRECTIVE_PATTERN = re.compile(r"^\s*//\s+(.+)")
LITERAL_PATTERN = re.compile(r"^(true|false|undefined|null|[0-9]+)$")


class _Undefined:
    """Falsy marker for an explicit ``undefined`` value.

    Kept distinct from ``None`` so ``out: undefined`` behaves like a missing
    key instead of suppressing output the way ``out: null`` does.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "undefined"


UNDEFINED = _Undefined()

_LITERALS = {
    "true": True,
    "false": False,
    "null": None,
    "undefined": UNDEFINED,
}


def coerce_value(value: str) -> Any:
    """Convert a literal directive value to its native type.

    Parameters
    ----------
    value : str
        Trimmed value text

    Returns
    -------
    Any
        bool, None, UNDEFINED or int for literal text, otherwise the string
    """
    if not LITERAL_PATTERN.match(value):
        return value
    if value in _LITERALS:
        return _LITERALS[value]
    return int(value)


def read_options(content: str) -> Dict[str, Any]:
    """Parse the directive on the first line of ``content``.

    Parameters
    ----------
    content : str
        Full text of the source file

    Returns
    -------
    Dict[str, Any]
        Parsed options; empty when the first line is not a directive
    """
    newline = content.find("\n")
    first_line = content if newline < 0 else content[:newline]

    match = DIRECTIVE_PATTERN.match(first_line)
    options: Dict[str, Any] = {}
    if not match:
        return options

    for item in match.group(1).split(","):
        key, sep, value = item.partition(":")
        if not sep:
            continue
        options[key.strip()] = coerce_value(value.strip())

    return options
