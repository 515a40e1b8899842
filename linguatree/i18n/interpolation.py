"""Placeholder interpolation for translation templates.

Two call conventions share one substitution core:

- named: ``{name}`` placeholders filled from a mapping
- positional: literal ``{}`` tokens filled left to right from a sequence

Placeholders without a value are left verbatim; values are stringified
with ``str()``.
"""

import re
from typing import Any, Callable, Mapping, Optional, Sequence

NAMED_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")
POSITIONAL_PLACEHOLDER = re.compile(r"\{\}")


def _substitute(
    template: str, pattern: "re.Pattern[str]", lookup: Callable[[re.Match], Optional[str]]
) -> str:
    def _replace(match: re.Match) -> str:
        value = lookup(match)
        return match.group(0) if value is None else value

    return pattern.sub(_replace, template)


def interpolate_named(template: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Replace every ``{name}`` found in params with ``str(params[name])``.

    Args:
        template: Message template.
        params: Mapping of placeholder name to value.

    Returns:
        Interpolated message. Unmatched placeholders are kept as-is.
    """
    if not params:
        return template

    def _lookup(match: re.Match) -> Optional[str]:
        name = match.group(1)
        if name not in params:
            return None
        return str(params[name])

    return _substitute(template, NAMED_PLACEHOLDER, _lookup)


def interpolate_positional(template: str, args: Sequence[Any] = ()) -> str:
    """Replace each ``{}`` token, left to right, with the next argument.

    Once the arguments run out the remaining tokens stay verbatim; surplus
    arguments are discarded.

    Example:
        >>> interpolate_positional("Found {} apples and {} pears", [2])
        'Found 2 apples and {} pears'
    """
    if not args:
        return template

    values = iter(args)

    def _lookup(match: re.Match) -> Optional[str]:
        try:
            return str(next(values))
        except StopIteration:
            return None

    return _substitute(template, POSITIONAL_PLACEHOLDER, _lookup)
