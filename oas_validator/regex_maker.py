"""Turning path templates into regular expressions."""

from __future__ import annotations

import re

_META = set("\\.+*?()|[]{}^$")


class PathTemplateError(ValueError):
    """A path template is malformed or yields an unusable pattern."""


def _quote_meta(s: str) -> str:
    return "".join("\\" + c if c in _META else c for c in s)


def brace_indices(s: str) -> list[int]:
    """Return start/end index pairs of top-level brace groups in s."""
    level = 0
    start = 0
    idxs: list[int] = []
    for i, ch in enumerate(s):
        if ch == "{":
            level += 1
            if level == 1:
                start = i
        elif ch == "}":
            level -= 1
            if level == 0:
                idxs.extend((start, i + 1))
            elif level < 0:
                raise PathTemplateError(f"unbalanced braces in {s!r}")
    if level != 0:
        raise PathTemplateError(f"unbalanced braces in {s!r}")
    return idxs


def get_regex_for_path(tpl: str) -> re.Pattern[str]:
    """Compile a path template such as '/orders/{id:[0-9]+}' into a regex."""
    idxs = brace_indices(tpl)
    parts = ["^"]
    end = 0
    for start, stop in zip(idxs[::2], idxs[1::2]):
        raw = tpl[end:start]
        end = stop
        name, sep, patt = tpl[start + 1 : stop - 1].partition(":")
        if not sep:
            patt = "[^/]*"
        if not name or not patt:
            raise PathTemplateError(f"missing name or pattern in {tpl[start:stop]!r}")
        parts.append(f"{_quote_meta(raw)}({patt})")
    parts.append(_quote_meta(tpl[end:]))
    parts.append("$")
    try:
        reg = re.compile("".join(parts))
    except re.error as exc:
        raise PathTemplateError(str(exc)) from exc
    if reg.groups != len(idxs) // 2:
        raise PathTemplateError(
            f"route {tpl} contains capture groups in its regexp. Only non-capturing "
            "groups are accepted: e.g. (?:pattern) instead of (pattern)"
        )
    return reg