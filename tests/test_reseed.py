import pytest

from evosim.reseed import (
    GenomeFormatError,
    binary_to_hex,
    hex_to_binary,
    parse_reseed_genome,
    validate_genome_string,
    word_string_to_number,
)

ZEROS = "0" * 32
ONES = "1" * 32
ALTERNATING = "10" * 16


def test_validate_binary_accepts_whole_words():
    assert validate_genome_string(ZEROS + ONES, False) is True


def test_validate_binary_rejects_partial_word():
    assert validate_genome_string(ZEROS[:-1], False) is False


def test_validate_binary_rejects_other_digits():
    assert validate_genome_string("2" + ZEROS[1:], False) is False


def test_validate_hex_accepts_either_case():
    assert validate_genome_string("abcdef01ABCDEF01", True) is True


def test_validate_hex_rejects_bad_length_and_chars():
    assert validate_genome_string("ABCDEF0", True) is False
    assert validate_genome_string("ABCDEFG0", True) is False


def test_validate_empty_is_valid():
    assert validate_genome_string("", True) is True
    assert validate_genome_string("", False) is True


def test_binary_to_hex_fixed_words():
    assert binary_to_hex(ZEROS) == "00000000"
    assert binary_to_hex(ONES) == "FFFFFFFF"


def test_binary_to_hex_is_upper_case():
    result = binary_to_hex(ALTERNATING + ONES)
    assert result == result.upper()
    assert len(result) == 16


def test_hex_to_binary_accepts_lower_case():
    assert hex_to_binary("ffffffff") == ONES
    assert hex_to_binary("00000000") == ZEROS


@pytest.mark.parametrize("binary", [ZEROS, ONES, ALTERNATING, ALTERNATING + ZEROS + ONES])
def test_round_trip_binary_hex(binary):
    assert hex_to_binary(binary_to_hex(binary)) == binary


def test_binary_to_hex_rejects_bad_digits():
    with pytest.raises(GenomeFormatError):
        binary_to_hex("2" * 32)


def test_hex_to_binary_rejects_bad_digits():
    with pytest.raises(GenomeFormatError):
        hex_to_binary("ZZZZZZZZ")


def test_word_string_to_number_binary_and_hex_agree():
    assert word_string_to_number(ONES, 2) == word_string_to_number("FFFFFFFF", 16)
    assert word_string_to_number(ONES, 2) == 0xFFFFFFFF


def test_word_string_to_number_errors():
    with pytest.raises(GenomeFormatError):
        word_string_to_number("", 2)
    with pytest.raises(GenomeFormatError):
        word_string_to_number("1" * 33, 2)
    with pytest.raises(GenomeFormatError):
        word_string_to_number("12", 2)


def test_parse_binary_genome():
    words = parse_reseed_genome(ZEROS + ONES, False, 2)
    assert words == [0, 0xFFFFFFFF]


def test_parse_hex_matches_binary():
    binary = ALTERNATING + ONES
    assert parse_reseed_genome(binary_to_hex(binary), True, 2) == parse_reseed_genome(
        binary, False, 2
    )


def test_parse_rejects_wrong_word_count():
    with pytest.raises(GenomeFormatError):
        parse_reseed_genome(ZEROS, False, 2)


def test_parse_rejects_invalid_text():
    with pytest.raises(GenomeFormatError):
        parse_reseed_genome("XYZ", True, 1)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        parse_reseed_genome(ZEROS[:10], False, 1)