# tests/test_term_loader.py

import pytest
from weighted_autocompleter.core.errors import InvalidWeightError, TermFileError
from weighted_autocompleter.utils.term_loader import load_terms, parse_terms


def test_parse_with_count_header():
    words, weights = parse_terms(["3\n", "   3\tair\n", "   2\tbat\n", "4\tbell\n"])
    assert words == ["air", "bat", "bell"]
    assert weights == [3.0, 2.0, 4.0]


def test_parse_without_header_and_blank_lines():
    words, weights = parse_terms(["5\tnew york\n", "\n", "1.5\tboston\r\n"])
    assert words == ["new york", "boston"]
    assert weights == [5.0, 1.5]


def test_header_mismatch_only_warns(caplog):
    words, _ = parse_terms(["10", "1\ta"])
    assert words == ["a"]
    assert "declares 10 terms" in caplog.text


@pytest.mark.parametrize("line", ["bell", "abc\tbell", "3\t", "\tbell"])
def test_malformed_line(line):
    with pytest.raises(TermFileError) as exc:
        parse_terms(["1\tok", line])
    assert exc.value.lineno == 2


def test_negative_weight():
    with pytest.raises(InvalidWeightError):
        parse_terms(["-1\tbad"])


def test_load_terms_from_file(tmp_path):
    p = tmp_path / "terms.txt"
    p.write_text("2\n   10\tthe\n    7\tthey\n", encoding="utf-8")
    assert load_terms(p) == (["the", "they"], [10.0, 7.0])


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_terms(tmp_path / "nope.txt")
