"""
Ordered fallback evaluation.

A strategy is any callable that returns a value or something falsy when it
cannot produce one. `first_match` tries them in order and stops at the first
hit, so a new fallback is added by appending to the list.
"""

import re
from typing import Any, Callable, Iterable

Strategy = Callable[..., Any]


def first_match(strategies: Iterable[Strategy], *args: Any, default: Any = "") -> Any:
    """Return the first truthy result of `strategy(*args)`, else `default`."""
    for strategy in strategies:
        result = strategy(*args)
        if result:
            return result
    return default


def regex_group(pattern: str, group: int = 1, flags: int = 0) -> Strategy:
    """Build a strategy that returns `group` of the first `pattern` match in a string."""
    compiled = re.compile(pattern, flags)

    def _search(text: str) -> str:
        match = compiled.search(text or "")
        return match.group(group).strip() if match else ""

    return _search


def regex_over(sources: Iterable[str], pattern: str, group: int = 1) -> str:
    """Apply one regex to several strings in order; first string with a match wins."""
    search = regex_group(pattern, group)
    return first_match([lambda s=s: search(s) for s in sources])
