"""
Shifted-function legends of the HP-16C, keyed by user key code
``(row + 1) * 10 + (col + 1) % 10`` (the rightmost column is 0).
"""

from __future__ import annotations

from typing import Mapping

LEGENDS: dict[int, str] = {
    11: "ln e^x",
    12: "log 10^x",
    13: "? fact",
    14: "sin -1",
    15: "cos -1",
    16: "tan -1",
    17: "MASKL",
    18: "MASKR",
    19: "RMD",
    10: "XOR",

    21: "x<>(i)",
    22: "x<>I",
    23: "SH HEX",
    24: "SH DEC",
    25: "SH OCT",
    26: "SH BIN",
    27: "SB",
    28: "CB",
    29: "B?",
    20: "AND",

    31: "(i)",
    32: "I",
    33: "CL PRGM",
    34: "CL REG",
    35: "CL PRFX",
    36: "WINDOW",
    37: "1s COMP",
    38: "2s COMP",
    39: "UNSIGNED",
    30: "NOT",

    41: "",
    42: "",
    43: "",
    44: "WSIZE",
    45: "FLOAT",
    47: "MEM",
    48: "STATUS",
    49: "EEX",
    40: "OR",
}

# Alternate bit-shift row for the top keys.
SHIFT_ROW_LEGENDS: dict[int, str] = {
    11: "SL",
    12: "SR",
    13: "RL",
    14: "RR",
    15: "RLn",
    16: "RRn",
}


def user_key_code(row: int, col: int) -> int:
    return (row + 1) * 10 + (col + 1) % 10


def legend_for(key_code: int, legends: Mapping[int, str] = LEGENDS) -> str:
    """Label for ``key_code``; keys without a legend get an empty label."""
    return legends.get(key_code, "")


def legend_table(shift_row: bool = False) -> dict[int, str]:
    if shift_row:
        return {**LEGENDS, **SHIFT_ROW_LEGENDS}
    return dict(LEGENDS)
