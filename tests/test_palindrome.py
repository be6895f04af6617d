import pytest

from algodrills.palindrome import (
    longest_palindrome,
    longest_palindrome_centers,
    longest_palindrome_expand,
)


@pytest.mark.parametrize(
    "text, accepted",
    [
        ("babad", {"bab", "aba"}),
        ("a", {"a"}),
        ("abc", {"a", "b", "c"}),
        ("asdwGca1acGasdw", {"Gca1acG"}),
        ("cbbd", {"bb"}),
        ("123ababbaba123", {"ababbaba"}),
        ("bb", {"bb"}),
        ("abb", {"bb"}),
        ("aaaa", {"aaaa"}),
    ],
)
def test_known_cases(text, accepted):
    assert longest_palindrome(text) in accepted
    assert longest_palindrome_expand(text) in accepted
    assert longest_palindrome_centers(text) in accepted


def test_empty_string():
    assert longest_palindrome("") == ""
    assert longest_palindrome_expand("") == ""
    assert longest_palindrome_centers("") == ""


@pytest.mark.parametrize(
    "text", ["forgeeksskeegfor", "abacdfgdcaba", "racecar", "xyzzyx12", "noonmadam"]
)
def test_result_is_palindromic_substring(text):
    results = [
        longest_palindrome(text),
        longest_palindrome_expand(text),
        longest_palindrome_centers(text),
    ]
    for result in results:
        assert result == result[::-1]
        assert result in text


@pytest.mark.parametrize(
    "text", ["forgeeksskeegfor", "abacdfgdcaba", "racecar", "xyzzyx12", "babad", "cbbd"]
)
def test_all_solvers_agree_on_length(text):
    lengths = {
        len(longest_palindrome(text)),
        len(longest_palindrome_expand(text)),
        len(longest_palindrome_centers(text)),
    }
    assert len(lengths) == 1


def test_dynamic_programming_prefers_last_of_equal_length():
    assert longest_palindrome("babad") == "aba"