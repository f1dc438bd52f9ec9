"""Shortcode codec

This module defines the shortcode alphabet and the canonical form of a shortcode.
All tolerance for human transcription errors lives here: the same canonicalization
is applied when a shortcut is written (to derive its primary key) and on every
read or delete (to map whatever the user typed back onto that key).

Functions:
    generate_candidate(length=8) -> str:
        Generate a fresh random shortcode in display form, e.g. 'K3ZB-7QXA'.

    canonicalize(code, legacy=False) -> str | None:
        Derive the canonical key from any display form, e.g. 'ABCD-1234' -> 'abcd1234'.

    pretty_print(code, legacy=False) -> str | None:
        Render a shortcode in display form: uppercase, two groups of four.

    is_canonical(code) -> bool:
        Check whether a string is already a canonical key.

Example:
    >>> from shortcuts.utils.shortcode import canonicalize, pretty_print
    >>> canonicalize('l23ou')
    '1230v'
    >>> pretty_print('abcd1234')
    'ABCD-1234'

NOTE:
    - The alphabet is 33 symbols: 0-9 plus a-z without l, o and u, which read
      like 1, 0 and v. Eight symbols give 33**8 (~1.4e12) codes.
    - Generation uses the `random` module. Uniqueness is guaranteed by the
      store's insert-if-absent protocol, not by the generator.
"""

import re
import random

from shortcuts.utils.constants import (
    CONFUSABLES,
    SHORTCODE_ALPHABET,
    SHORTCODE_LENGTH,
    SHORTCODE_GROUP_SIZE,
    SHORTCODE_SEPARATOR,
)


ALPHABET = SHORTCODE_ALPHABET
BASE = len(ALPHABET)

_NON_ALPHANUMERIC = re.compile(r'[^0-9a-z]')
_CANONICAL = re.compile(f'[{ALPHABET}]+')
_CONFUSABLES_TABLE = str.maketrans(CONFUSABLES)


def generate_candidate(length: int = SHORTCODE_LENGTH) -> str:
    """Generate a random shortcode candidate in display form

    Each position is an independent uniform draw from the alphabet.

    Args:
        length (int, optional):
            Number of symbols in the code. Defaults to 8.

    Returns:
        str: pretty-printed candidate, e.g. 'K3ZB-7QXA'.

    Raises:
        ValueError: If length is not a positive integer.
    """
    if length < 1:
        raise ValueError(f'Shortcode length must be a positive integer (given value: {length}).')

    return pretty_print(''.join(random.choices(ALPHABET, k=length)))


def canonicalize(code: str | None, legacy: bool = False) -> str | None:
    """Derive the canonical key of a shortcode

    Steps:
    1- Lowercase the input
    2- Strip every character that is not an ASCII letter or digit
    3- Map the confusable characters o, l and u to 0, 1 and v

    The default mapping replaces every occurrence and is idempotent. With
    `legacy=True` only the first occurrence of each confusable is replaced,
    which is how keys were derived by earlier deployments; 'loop' then becomes
    '10op', and canonicalizing that again yields '100p'.

    Args:
        code (str | None):
            Shortcode in any display form.
        legacy (bool, optional):
            Replace only the first occurrence of each confusable. Defaults to False.

    Returns:
        str | None: canonical key. Falsy input is returned unchanged.

    Example:
        >>> canonicalize('ABCD-1234')
        'abcd1234'
        >>> canonicalize('loop')
        '100p'
        >>> canonicalize('loop', legacy=True)
        '10op'
    """
    if not code:
        return code

    key = _NON_ALPHANUMERIC.sub('', code.lower())
    if not legacy:
        return key.translate(_CONFUSABLES_TABLE)

    for confusable, replacement in CONFUSABLES.items():
        key = key.replace(confusable, replacement, 1)
    return key


def pretty_print(code: str | None, legacy: bool = False) -> str | None:
    """Render a shortcode in display form

    The canonical key is uppercased and split into two groups of four symbols.
    Codes shorter than a full group are sliced as far as they go, without padding.

    Args:
        code (str | None):
            Shortcode in any display form.
        legacy (bool, optional):
            Passed through to canonicalize(). Defaults to False.

    Returns:
        str | None: display code, e.g. 'ABCD-1234'. Falsy input is returned unchanged.

    Example:
        >>> pretty_print('abcd1234')
        'ABCD-1234'
        >>> pretty_print('abc')
        'ABC-'
    """
    if not code:
        return code

    key = canonicalize(code, legacy=legacy).upper()
    return f'{key[:SHORTCODE_GROUP_SIZE]}{SHORTCODE_SEPARATOR}{key[SHORTCODE_GROUP_SIZE:]}'


def is_canonical(code: str | None) -> bool:
    """Check whether a string only uses alphabet symbols (i.e. is a canonical key)"""
    return bool(code) and _CANONICAL.fullmatch(code) is not None
