"""Name matching for command and argument templates.

A template may list alternatives separated by ``,`` and mark optional
endings with ``/``: ``"ch/annel"`` matches ``"ch"`` and ``"channel"``,
``"a,b"`` matches ``"a"`` and ``"b"``.
"""

from __future__ import annotations

_TERMINATORS = ",/\0"


def _ascii_lower(ch: str) -> str:
    if "A" <= ch <= "Z":
        return chr(ord(ch) + 32)
    return ch


def compare(user_text: str | None, template: str | None, case_sensitive: bool = False) -> bool:
    """Return True if ``user_text`` matches the name template ``template``."""
    if user_text is None or template is None:
        return user_text is None and template is None

    if case_sensitive:
        def same(a: str, b: str) -> bool:
            return a == b
    else:
        def same(a: str, b: str) -> bool:
            return _ascii_lower(a) == _ascii_lower(b)

    str_len = len(user_text)
    key_len = len(template)

    if str_len == key_len:
        return all(same(u, t) for u, t in zip(user_text, template))

    if str_len > key_len:
        return False

    def at(index: int) -> str:
        return template[index] if index < key_len else "\0"

    a = 0
    b = 0
    matched = True

    while a < str_len and b < key_len:
        if at(b) == "/":
            b += 1
        elif at(b) == ",":
            b += 1
            a = 0

        if not same(user_text[a], at(b)):
            matched = False

        if not matched or (a == str_len - 1 and at(b + 1) not in _TERMINATORS):
            while b < key_len and at(b) != ",":
                b += 1
            matched = True
        else:
            a += 1
            b += 1

    return matched and a == str_len and at(b) in _TERMINATORS