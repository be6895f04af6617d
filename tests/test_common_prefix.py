import pytest

from algodrills.common_prefix import (
    MAX_LENGTH,
    PrefixTrie,
    longest_common_prefix,
    prefix_by_divide_and_conquer,
    prefix_by_horizontal_scan,
    prefix_by_trie,
    prefix_by_vertical_scan,
)

SAMPLES = [
    ["flower", "fl", "flight"],
    ["flower", "flow", "flight"],
    ["dog", "racecar", "car"],
    ["interspecies", "interstellar", "interstate"],
    ["same", "same", "same"],
    ["alone"],
    ["abc", ""],
    ["a", "ab", "abc"],
]


def test_source_example():
    strs = ["flower", "fl", "flight"]
    assert longest_common_prefix(strs) == "fl"
    assert prefix_by_horizontal_scan(strs) == "fl"
    assert prefix_by_vertical_scan(strs) == "fl"
    assert prefix_by_divide_and_conquer(strs) == "fl"
    assert prefix_by_trie(strs) == "fl"


def test_empty_list():
    assert longest_common_prefix([]) == ""
    assert prefix_by_horizontal_scan([]) == ""
    assert prefix_by_vertical_scan([]) == ""
    assert prefix_by_divide_and_conquer([]) == ""
    assert prefix_by_trie([]) == ""


@pytest.mark.parametrize("strs", SAMPLES)
def test_result_is_prefix_of_every_string(strs):
    results = [
        longest_common_prefix(strs),
        prefix_by_horizontal_scan(strs),
        prefix_by_vertical_scan(strs),
        prefix_by_divide_and_conquer(strs),
        prefix_by_trie(strs),
    ]
    for result in results:
        assert all(s.startswith(result) for s in strs)


@pytest.mark.parametrize("strs", SAMPLES)
def test_methods_agree(strs):
    results = {
        longest_common_prefix(strs),
        prefix_by_horizontal_scan(strs),
        prefix_by_vertical_scan(strs),
        prefix_by_divide_and_conquer(strs),
        prefix_by_trie(strs),
    }
    assert len(results) == 1


def test_single_string_is_its_own_prefix():
    strs = ["alone"]
    assert longest_common_prefix(strs) == "alone"
    assert prefix_by_horizontal_scan(strs) == "alone"
    assert prefix_by_vertical_scan(strs) == "alone"
    assert prefix_by_divide_and_conquer(strs) == "alone"
    assert prefix_by_trie(strs) == "alone"


def test_result_cannot_be_extended():
    strs = ["interspecies", "interstellar", "interstate"]
    results = [
        longest_common_prefix(strs),
        prefix_by_horizontal_scan(strs),
        prefix_by_vertical_scan(strs),
        prefix_by_divide_and_conquer(strs),
        prefix_by_trie(strs),
    ]
    for result in results:
        assert result == "inters"
        longer = strs[0][: len(result) + 1]
        assert not all(s.startswith(longer) for s in strs)


def test_binary_search_caps_length():
    strs = ["a" * 300, "a" * 300]
    assert longest_common_prefix(strs) == "a" * MAX_LENGTH
    assert prefix_by_vertical_scan(strs) == "a" * 300


def test_trie_stops_at_end_of_word():
    trie = PrefixTrie()
    trie.insert("flower")
    trie.insert("flow")
    assert trie.common_prefix() == "flow"


def test_trie_with_branching_words():
    trie = PrefixTrie()
    for word in ("interstellar", "interstate", "internal"):
        trie.insert(word)
    assert trie.common_prefix() == "inter"


def test_empty_trie_has_empty_prefix():
    assert PrefixTrie().common_prefix() == ""