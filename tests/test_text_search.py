import pytest

from algodrills.text_search import (
    find_concatenations,
    find_concatenations_brute,
    find_index,
)

EXAMPLES = [
    ("barfoothefoobarman", ["foo", "bar"]),
    ("wordgoodgoodgoodbestword", ["word", "good", "best", "word"]),
    ("barfoofoobarthefoobarman", ["bar", "foo", "the"]),
    ("lingmindraboofooowingdingbarrwingmonkeypoundcake", ["fooo", "barr", "wing", "ding", "wing"]),
]


@pytest.mark.parametrize(
    "haystack, needle, expected",
    [
        ("sadbutsad", "sad", 0),
        ("leetcode", "leet", 0),
        ("leetcode", "leett", -1),
        ("leetcode", "code", 4),
        ("mississippi", "issip", 4),
    ],
)
def test_find_index_source_cases(haystack, needle, expected):
    assert find_index(haystack, needle) == expected


@pytest.mark.parametrize(
    "haystack, needle",
    [("aaab", "aab"), ("abcabc", "cab"), ("xyz", "q"), ("mississippi", "ssi")],
)
def test_find_index_agrees_with_str_find(haystack, needle):
    assert find_index(haystack, needle) == haystack.find(needle)


def test_find_index_needle_longer_than_haystack():
    assert find_index("ab", "abc") == -1


def test_find_index_empty_needle_rejected():
    with pytest.raises(ValueError):
        find_index("abc", "")


def test_concatenation_first_example():
    assert find_concatenations("barfoothefoobarman", ["foo", "bar"]) == [0, 9]


def test_concatenation_no_match():
    assert find_concatenations(*EXAMPLES[1]) == []


def test_concatenation_repeated_word():
    assert find_concatenations(*EXAMPLES[3]) == [13]


@pytest.mark.parametrize("s, words", EXAMPLES)
def test_window_and_brute_agree(s, words):
    assert sorted(find_concatenations(s, words)) == sorted(find_concatenations_brute(s, words))


@pytest.mark.parametrize("s, words", EXAMPLES)
def test_every_index_is_a_concatenation(s, words):
    width = len(words[0])
    for index in find_concatenations(s, words):
        chunk = s[index:index + width * len(words)]
        pieces = [chunk[k:k + width] for k in range(0, len(chunk), width)]
        assert sorted(pieces) == sorted(words)


def test_empty_word_list_rejected():
    with pytest.raises(ValueError):
        find_concatenations("abc", [])
    with pytest.raises(ValueError):
        find_concatenations_brute("abc", [])