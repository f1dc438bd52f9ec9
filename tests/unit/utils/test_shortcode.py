"""Unit tests for the shortcode codec in shortcode.py.

Test coverage includes:

1. Alphabet
   - 33 symbols, lowercase alphanumerics without the confusables l, o, u.

2. Candidate generation
   - Candidates are in display form and canonicalize to 8 alphabet symbols.
   - Random draws are taken from the alphabet only.

3. Canonicalization
   - Lowercases, strips non-alphanumerics, maps confusables.
   - Idempotent in the default mode.
   - Falsy input passes through unchanged.

4. Legacy (first occurrence only) canonicalization
   - Only the first o, l and u are replaced.
   - Not idempotent for repeated confusables.

5. Pretty printing
   - Two groups of four uppercase symbols.
   - Best effort slicing for short codes.
"""

import re
from unittest.mock import patch

import pytest

from shortcuts.utils.shortcode import ALPHABET, BASE, canonicalize, generate_candidate, is_canonical, pretty_print


PRETTY_PATTERN = re.compile(f'[{ALPHABET.upper()}]{{4}}-[{ALPHABET.upper()}]{{4}}')


# -------------------------------
# 1. Alphabet
# -------------------------------


def test_alphabet_has_33_unique_symbols():
    """Ensure the alphabet is 33 distinct lowercase alphanumeric symbols."""
    assert BASE == 33
    assert len(set(ALPHABET)) == 33
    assert all(symbol.isdigit() or symbol.islower() for symbol in ALPHABET)


@pytest.mark.parametrize('confusable', ['l', 'o', 'u'])
def test_alphabet_excludes_confusables(confusable):
    """Ensure l, o and u never appear in generated codes."""
    assert confusable not in ALPHABET


# -------------------------------
# 2. Candidate generation
# -------------------------------


@pytest.mark.parametrize('iteration', range(50))
def test_generate_candidate_is_pretty_printed(iteration):
    """Ensure candidates look like XXXX-YYYY and canonicalize to 8 alphabet symbols."""
    candidate = generate_candidate()
    key = canonicalize(candidate)

    assert PRETTY_PATTERN.fullmatch(candidate)
    assert len(key) == 8
    assert all(symbol in ALPHABET for symbol in key)


def test_generate_candidate_draws_from_alphabet():
    """Ensure every position is an independent draw from the alphabet."""
    with patch('shortcuts.utils.shortcode.random.choices', return_value=list('k3zb7qxa')) as choices_mock:
        candidate = generate_candidate()

    choices_mock.assert_called_once_with(ALPHABET, k=8)
    assert candidate == 'K3ZB-7QXA'


def test_generate_candidate_with_custom_length():
    """Ensure the length parameter is respected."""
    assert len(canonicalize(generate_candidate(length=12))) == 12


@pytest.mark.parametrize('length', [0, -3])
def test_generate_candidate_with_invalid_length(length):
    """Ensure non-positive lengths raise ValueError."""
    with pytest.raises(ValueError):
        generate_candidate(length=length)


# -------------------------------
# 3. Canonicalization
# -------------------------------


@pytest.mark.parametrize(
    'code, expected',
    [
        ('ABCD-1234', 'abcd1234'),
        ('l23ou', '1230v'),
        ('  k3zb 7qxa\n', 'k3zb7qxa'),
        ('K3ZB_7QXA!', 'k3zb7qxa'),
        ('TEST', 'test'),
        ('loop', '100p'),
        ('LULU', '1v1v'),
        ('ÄBC', 'bc'),
    ],
)
def test_canonicalize(code, expected):
    """Ensure canonicalize() lowercases, strips and maps every confusable."""
    assert canonicalize(code) == expected


@pytest.mark.parametrize('code', ['ABCD-1234', 'loop', 'Hello, World!', 'oOoO-lLlL-uUuU', generate_candidate()])
def test_canonicalize_is_idempotent(code):
    """Ensure canonicalizing an already canonical key yields itself."""
    key = canonicalize(code)
    assert canonicalize(key) == key


@pytest.mark.parametrize('code', [None, ''])
def test_canonicalize_passes_falsy_input_through(code):
    """Ensure falsy input is returned unchanged instead of raising."""
    assert canonicalize(code) is code


def test_canonicalize_may_return_empty_string():
    """Ensure codes without letters or digits canonicalize to an empty key."""
    assert canonicalize('---') == ''


# -------------------------------
# 4. Legacy canonicalization
# -------------------------------


@pytest.mark.parametrize(
    'code, expected',
    [
        ('ABCD-1234', 'abcd1234'),
        ('l23ou', '1230v'),
        ('loop', '10op'),
        ('LULU', '1vlu'),
        ('uuu-ooo-lll', 'vuu0oo1ll'),
    ],
)
def test_legacy_canonicalize_replaces_first_occurrence_only(code, expected):
    """Ensure legacy mode only maps the first o, l and u."""
    assert canonicalize(code, legacy=True) == expected


def test_legacy_canonicalize_is_not_idempotent_for_repeated_confusables():
    """Document that legacy keys with repeated confusables change when canonicalized again."""
    key = canonicalize('loop', legacy=True)
    assert canonicalize(key, legacy=True) == '100p'
    assert canonicalize(key, legacy=True) != key


def test_legacy_and_default_agree_without_repeated_confusables():
    """Ensure both modes derive the same key when each confusable appears at most once."""
    assert canonicalize('l23ou', legacy=True) == canonicalize('l23ou')


# -------------------------------
# 5. Pretty printing
# -------------------------------


@pytest.mark.parametrize(
    'code, expected',
    [
        ('abcd1234', 'ABCD-1234'),
        ('ABCD-1234', 'ABCD-1234'),
        ('k3zb 7qxa', 'K3ZB-7QXA'),
        ('l0o0-1234', '1000-1234'),
        ('abcd', 'ABCD-'),
        ('abc', 'ABC-'),
        ('abcd12345', 'ABCD-12345'),
    ],
)
def test_pretty_print(code, expected):
    """Ensure pretty_print() renders two uppercase groups separated by a dash."""
    assert pretty_print(code) == expected


@pytest.mark.parametrize('code', [None, ''])
def test_pretty_print_passes_falsy_input_through(code):
    assert pretty_print(code) is code


def test_pretty_print_round_trips_through_canonicalize():
    """Ensure display and canonical forms only differ by canonicalization."""
    assert canonicalize(pretty_print('k3zb7qxa')) == 'k3zb7qxa'


# -------------------------------
# 6. is_canonical
# -------------------------------


@pytest.mark.parametrize(
    'code, expected',
    [
        ('k3zb7qxa', True),
        ('K3ZB-7QXA', False),
        ('loop', False),
        ('', False),
        (None, False),
    ],
)
def test_is_canonical(code, expected):
    assert is_canonical(code) is expected
