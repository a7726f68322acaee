"""CEA-608 character table for SCC encoding.

WHY: SCC files carry caption text as CEA-608 byte pairs written in hex.
Playback hardware interprets these codes directly, so the table below
is wire data and must not drift from the standard's character sets.

HOW: CHARACTER_CODES maps hex code -> character and is frozen with
MappingProxyType at import. The encoding map (character -> code) is
derived from it once, skipping non-printing entries.

RULES:
- Two-digit codes are the basic set with the odd-parity bit applied
- Four-digit codes are special (91xx) and extended (92xx, 13xx) characters
- "7f", "80" and "91b9" decode to "" and are never used for encoding
- Characters missing from the table encode as "7f"
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping

from scc_converter.config import FALLBACK_CODE

CHARACTER_CODES: Mapping[str, str] = MappingProxyType({
    "20": " ",
    "a1": "!",
    "a2": "\"",
    "23": "#",
    "a4": "$",
    "25": "%",
    "26": "&",
    "a7": "'",
    "a8": "(",
    "29": ")",
    "2a": "á",
    "ab": "+",
    "2c": ",",
    "ad": "-",
    "ae": ".",
    "2f": "/",
    "b0": "0",
    "31": "1",
    "32": "2",
    "b3": "3",
    "34": "4",
    "b5": "5",
    "b6": "6",
    "37": "7",
    "38": "8",
    "b9": "9",
    "ba": ":",
    "3b": ";",
    "bc": "<",
    "3d": "=",
    "3e": ">",
    "bf": "?",
    "40": "@",
    "c1": "A",
    "c2": "B",
    "43": "C",
    "c4": "D",
    "45": "E",
    "46": "F",
    "c7": "G",
    "c8": "H",
    "49": "I",
    "4a": "J",
    "cb": "K",
    "4c": "L",
    "cd": "M",
    "ce": "N",
    "4f": "O",
    "d0": "P",
    "51": "Q",
    "52": "R",
    "d3": "S",
    "54": "T",
    "d5": "U",
    "d6": "V",
    "57": "W",
    "58": "X",
    "d9": "Y",
    "da": "Z",
    "5b": "[",
    "dc": "é",
    "5d": "]",
    "5e": "í",
    "df": "ó",
    "e0": "ú",
    "61": "a",
    "62": "b",
    "e3": "c",
    "64": "d",
    "e5": "e",
    "e6": "f",
    "67": "g",
    "68": "h",
    "e9": "i",
    "ea": "j",
    "6b": "k",
    "ec": "l",
    "6d": "m",
    "6e": "n",
    "ef": "o",
    "70": "p",
    "f1": "q",
    "f2": "r",
    "73": "s",
    "f4": "t",
    "75": "u",
    "76": "v",
    "f7": "w",
    "f8": "x",
    "79": "y",
    "7a": "z",
    "fb": "ç",
    "7c": "÷",
    "fd": "Ñ",
    "fe": "ñ",
    "7f": "",
    "80": "",
    "91b0": "®",
    "9131": "°",
    "9132": "½",
    "91b3": "¿",
    "91b4": "™",
    "91b5": "¢",
    "91b6": "£",
    "9137": "♪",
    "9138": "à",
    "91b9": "",
    "91ba": "è",
    "913b": "â",
    "91bc": "ê",
    "913d": "î",
    "913e": "ô",
    "91bf": "û",
    "9220": "Á",
    "92a1": "É",
    "92a2": "Ó",
    "9223": "Ú",
    "92a4": "Ü",
    "9225": "ü",
    "9226": "‘",
    "92a7": "¡",
    "92a8": "*",
    "9229": "’",
    "922a": "—",
    "92ab": "©",
    "922c": "℠",
    "92ad": "•",
    "92ae": "“",
    "922f": "”",
    "92b0": "À",
    "9231": "Â",
    "9232": "Ç",
    "92b3": "È",
    "9234": "Ê",
    "92b5": "Ë",
    "92b6": "ë",
    "9237": "Î",
    "9238": "Ï",
    "92b9": "ï",
    "92ba": "Ô",
    "923b": "Ù",
    "92bc": "ù",
    "923d": "Û",
    "923e": "«",
    "92bf": "»",
    "1320": "Ã",
    "13a1": "ã",
    "13a2": "Í",
    "1323": "Ì",
    "13a4": "ì",
    "1325": "Ò",
    "1326": "ò",
    "13a7": "Õ",
    "13a8": "õ",
    "1329": "{",
    "132a": "}",
    "13ab": "\\",
    "132c": "^",
    "13ad": "_",
    "13ae": "¦",
    "132f": "~",
    "13b0": "Ä",
    "1331": "ä",
    "1332": "Ö",
    "13b3": "ö",
    "1334": "ß",
    "13b5": "¥",
    "13b6": "¤",
    "1337": "|",
    "1338": "Å",
    "13b9": "å",
    "13ba": "Ø",
    "133b": "ø",
    "13bc": "┌",
    "133d": "┐",
    "133e": "└",
    "13bf": "┘",
})


def _build_encoding_map(table: Mapping[str, str]) -> Mapping[str, str]:
    encoding: Dict[str, str] = {}
    for code, char in table.items():
        # Non-printing codes have no character to encode from
        if not char:
            continue
        encoding.setdefault(char, code)
    return MappingProxyType(encoding)


CHARACTER_TO_CODE: Mapping[str, str] = _build_encoding_map(CHARACTER_CODES)


def lookup(char: str) -> str:
    """Return the hex code for ``char``, or the fallback ``"7f"``."""
    return CHARACTER_TO_CODE.get(char, FALLBACK_CODE)


def reverse_lookup(code: str) -> str:
    """Return the character for a hex code.

    Unknown and non-printing codes decode to an empty string.
    """
    return CHARACTER_CODES.get(code.strip().lower(), "")


def is_supported(char: str) -> bool:
    return char in CHARACTER_TO_CODE
