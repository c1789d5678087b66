"""Keyboard input decoding for legacy xterm/VT terminals.

Turns the raw characters produced by a single keypress into a key
identifier such as ``"a"``, ``"up"``, ``"ctrl+c"`` or ``"shift+alt+f5"``,
and tells whether a partially read escape sequence still needs more input.
"""

from __future__ import annotations

ESC = "\x1b"

# ---------------------------------------------------------------------------
# Legacy escape sequences -> key names
# ---------------------------------------------------------------------------

LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[2~": "insert",
    "\x1b[3~": "delete",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
    "\x1bOP": "f1",
    "\x1bOQ": "f2",
    "\x1bOR": "f3",
    "\x1bOS": "f4",
    "\x1b[15~": "f5",
    "\x1b[17~": "f6",
    "\x1b[18~": "f7",
    "\x1b[19~": "f8",
    "\x1b[20~": "f9",
    "\x1b[21~": "f10",
    "\x1b[23~": "f11",
    "\x1b[24~": "f12",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[E": "clear",
}

# xterm modifier parameter -> key-id prefix. The parameter is 1 + a bitmask
# of shift (1), alt (2) and ctrl (4).
_MODIFIER_PREFIXES: dict[int, str] = {
    2: "shift+",
    3: "alt+",
    4: "shift+alt+",
    5: "ctrl+",
    6: "ctrl+shift+",
    7: "ctrl+alt+",
    8: "ctrl+shift+alt+",
}

_CSI_FINAL_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
    "P": "f1",
    "Q": "f2",
    "R": "f3",
    "S": "f4",
}

_TILDE_KEYS: dict[int, str] = {
    2: "insert",
    3: "delete",
    5: "pageUp",
    6: "pageDown",
    15: "f5",
    17: "f6",
    18: "f7",
    19: "f8",
    20: "f9",
    21: "f10",
    23: "f11",
    24: "f12",
}


def _modified_sequence_table() -> dict[str, str]:
    """Build the ``CSI 1;<mod><final>`` and ``CSI <n>;<mod>~`` tables."""
    table: dict[str, str] = {}
    for mod, prefix in _MODIFIER_PREFIXES.items():
        for final, name in _CSI_FINAL_KEYS.items():
            table[f"\x1b[1;{mod}{final}"] = prefix + name
        for number, name in _TILDE_KEYS.items():
            table[f"\x1b[{number};{mod}~"] = prefix + name
        for final in "PQRS":
            table[f"\x1bO{mod}{final}"] = prefix + _CSI_FINAL_KEYS[final]
    table["\x1b[Z"] = "shift+tab"
    return table


LEGACY_MODIFIED_SEQUENCES: dict[str, str] = _modified_sequence_table()


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_key(data: str) -> str | None:  # noqa: C901
    """Parse raw terminal input and return the key identifier, or ``None``."""
    if not data:
        return None

    if data in LEGACY_MODIFIED_SEQUENCES:
        return LEGACY_MODIFIED_SEQUENCES[data]
    if data in LEGACY_KEY_SEQUENCES:
        return LEGACY_KEY_SEQUENCES[data]

    # --- Simple single-byte keys ---
    if data == ESC:
        return "escape"
    if data == "\r" or data == "\n":
        return "enter"
    if data == "\t":
        return "tab"
    if data == " ":
        return "space"
    if data == "\x7f" or data == "\x08":
        return "backspace"
    if data == "\x00":
        return "ctrl+space"

    # --- Ctrl + letter (0x01 - 0x1a) ---
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return "ctrl+" + chr(ord(data) + ord("a") - 1)

    # --- Alt + key (ESC prefix) ---
    if len(data) == 2 and data[0] == ESC:
        ch = data[1]
        if ch == ESC:
            return "alt+escape"
        if ch == "\r" or ch == "\n":
            return "alt+enter"
        if ch == "\t":
            return "alt+tab"
        if ch == " ":
            return "alt+space"
        if ch == "\x7f" or ch == "\x08":
            return "alt+backspace"
        if 1 <= ord(ch) <= 26:
            return "ctrl+alt+" + chr(ord(ch) + ord("a") - 1)
        if ch.isupper():
            return "shift+alt+" + ch.lower()
        if ch.isprintable():
            return "alt+" + ch.lower()

    # --- Plain printable character ---
    if len(data) == 1 and data.isprintable():
        return data

    return None


def is_complete_sequence(data: str) -> str:
    """Check if *data* is a complete escape sequence or needs more input.

    Returns ``'complete'``, ``'incomplete'`` or ``'not-escape'``.
    """
    if not data.startswith(ESC):
        return "not-escape"

    if len(data) == 1:
        return "incomplete"

    after_esc = data[1:]

    # CSI sequences: ESC [ <params> <final byte 0x40-0x7e>
    if after_esc.startswith("["):
        if len(data) < 3:
            return "incomplete"
        return "complete" if 0x40 <= ord(data[-1]) <= 0x7E else "incomplete"

    # SS3 sequences: ESC O <final>, optionally with a modifier digit
    if after_esc.startswith("O"):
        if len(after_esc) < 2:
            return "incomplete"
        if after_esc[1].isdigit():
            return "complete" if len(after_esc) >= 3 else "incomplete"
        return "complete"

    # Meta key sequences: ESC followed by a single character
    return "complete"
