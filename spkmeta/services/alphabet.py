"""Positional base-64 numbers over the SPK alphabet.

This is not RFC 4648 Base64: digits come first, then upper and lower case
letters, then ``+`` and ``=``. Numbers are written most significant digit
first with no padding, so ``0`` is ``"0"`` and ``64`` is ``"10"``.
"""

from typing import Dict

from ..exceptions import InvalidInputError, InvalidSymbolError

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz+="
BASE = len(ALPHABET)

_SYMBOL_VALUES: Dict[str, int] = {symbol: i for i, symbol in enumerate(ALPHABET)}


def to_alphabet(n: int) -> str:
    """Encode a non-negative integer.

    Raises:
        InvalidInputError: ``n`` is negative or not an int.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidInputError(n)
    if n == 0:
        return ALPHABET[0]

    digits = []
    while n:
        n, remainder = divmod(n, BASE)
        digits.append(ALPHABET[remainder])
    return "".join(reversed(digits))


def from_alphabet(s: str) -> int:
    """Decode an alphabet string back to its integer.

    Raises:
        InvalidSymbolError: ``s`` is empty or holds a character outside the alphabet.
    """
    if not s:
        raise InvalidSymbolError(s)

    result = 0
    for position, symbol in enumerate(s):
        value = _SYMBOL_VALUES.get(symbol)
        if value is None:
            raise InvalidSymbolError(s, symbol, position)
        result = result * BASE + value
    return result


def is_alphabet(s: str) -> bool:
    return bool(s) and all(symbol in _SYMBOL_VALUES for symbol in s)
