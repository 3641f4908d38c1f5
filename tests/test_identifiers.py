"""
Unit tests for permanent id and token value generation.
"""
from patients.identifiers import (
    PERMANENT_ID_LENGTH,
    TOKEN_ALPHABET,
    TOKEN_LENGTH,
    generate_permanent_id,
    generate_token_value,
    is_permanent_id_format,
    is_token_format,
)


def test_permanent_id_is_twelve_digits():
    value = generate_permanent_id()
    assert len(value) == PERMANENT_ID_LENGTH
    assert value.isdigit()


def test_permanent_id_starts_with_timestamp_slice():
    value = generate_permanent_id(timestamp_ms=1718000012345678)
    assert value.startswith("12345678")
    assert len(value) == 12


def test_permanent_id_pads_short_timestamps():
    value = generate_permanent_id(timestamp_ms=42)
    assert value.startswith("00000042")


def test_token_value_shape():
    for _ in range(50):
        value = generate_token_value()
        assert len(value) == TOKEN_LENGTH
        assert set(value) <= set(TOKEN_ALPHABET)


def test_token_alphabet_has_36_symbols():
    assert len(set(TOKEN_ALPHABET)) == 36


def test_identifier_spaces_are_disjoint():
    for _ in range(50):
        permanent_id = generate_permanent_id()
        token = generate_token_value()
        assert is_permanent_id_format(permanent_id)
        assert not is_token_format(permanent_id)
        assert is_token_format(token)
        assert not is_permanent_id_format(token)
