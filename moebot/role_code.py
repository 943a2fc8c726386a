"""Per-user confirmation codes for self-assignable roles."""

from __future__ import annotations

import hashlib
import re

_VERB = re.compile(r"%(.)|%$", re.DOTALL)


def role_code(role_uid: str, user_uid: str) -> str:
    """Return the six-character code a user must quote to confirm a role."""
    digest = hashlib.sha256((role_uid + user_uid).encode("utf-8")).hexdigest()
    return digest[:6]


def _format_one(template: str, value: str) -> str:
    """Substitute ``value`` into the first verb of a printf-style template."""
    used = False

    def replace(match: re.Match[str]) -> str:
        nonlocal used
        verb = match.group(1)
        if verb is None:
            return "%!(NOVERB)"
        if verb == "%":
            return "%"
        if used:
            return f"%!{verb}(MISSING)"
        used = True
        if verb in ("s", "v"):
            return value
        if verb == "x":
            return value.encode("utf-8").hex()
        if verb == "X":
            return value.encode("utf-8").hex().upper()
        if verb == "q":
            return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
        return f"%!{verb}(string={value})"

    result = _VERB.sub(replace, template)
    if not used:
        result += f"%!(EXTRA string={value})"
    return result


def confirmation_message(template: str, role_uid: str, user_uid: str) -> str:
    """Fill the role's confirmation template with the user's role code."""
    return _format_one(template, role_code(role_uid, user_uid))