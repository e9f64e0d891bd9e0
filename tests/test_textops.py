import pytest

from algobasics.textops import (
    delete_substring,
    find_index,
    insert_substring,
    is_letter_palindrome,
    is_palindrome,
    remove_adjacent_duplicates,
    remove_duplicate_letters,
    replace_first,
    reverse_string,
    reverse_words,
    substring,
)

SAMPLE = "TO BE OR NOT TO BE"


def test_substring_is_prefix_of_tail():
    result = substring(SAMPLE, 4, 7)
    assert len(result) == 7
    assert SAMPLE[4:].startswith(result)


def test_substring_stops_at_end():
    result = substring(SAMPLE, 15, 10)
    assert len(result) == len(SAMPLE) - 15
    assert SAMPLE.endswith(result)


def test_substring_rejects_negative():
    with pytest.raises(ValueError):
        substring(SAMPLE, -1, 3)


def test_find_index_first_occurrence():
    idx = find_index(SAMPLE, "BE")
    assert SAMPLE[idx:idx + 2] == "BE"
    assert "BE" not in SAMPLE[:idx + 1]


def test_find_index_missing():
    assert find_index(SAMPLE, "XYZ") == -1
    assert find_index("ab", "abc") == -1


def test_find_index_empty_pattern():
    assert find_index(SAMPLE, "") == 0


def test_insert_then_delete_round_trip():
    inserted = insert_substring(SAMPLE, "INSERTED", 5)
    assert inserted[5:13] == "INSERTED"
    assert delete_substring(inserted, 5, len("INSERTED")) == SAMPLE


def test_insert_past_end_appends():
    assert insert_substring(SAMPLE, "XYZ", 100) == SAMPLE + "XYZ"


def test_insert_negative_position_prepends():
    assert insert_substring(SAMPLE, "XYZ", -3) == "XYZ" + SAMPLE


def test_delete_length():
    result = delete_substring(SAMPLE, 3, 4)
    assert len(result) == len(SAMPLE) - 4
    assert result[:3] == SAMPLE[:3]
    assert result[3:] == SAMPLE[7:]


def test_delete_rejects_negative():
    with pytest.raises(ValueError):
        delete_substring(SAMPLE, 2, -1)


def test_replace_first_only_first():
    result = replace_first(SAMPLE, "BE", "XX")
    assert result.count("XX") == 1
    assert result.count("BE") == SAMPLE.count("BE") - 1
    assert result.index("XX") == find_index(SAMPLE, "BE")


def test_replace_first_missing_pattern():
    assert replace_first(SAMPLE, "QQ", "XX") == SAMPLE


def test_is_palindrome_sample():
    assert is_palindrome("Able was I ere I saw Elba") is True
    assert is_palindrome("hello world") is False


def test_is_letter_palindrome():
    assert is_letter_palindrome("Able was I ere I saw Elba") is True
    assert is_letter_palindrome("A1b2a") is True
    assert is_letter_palindrome("abc") is False


def test_palindrome_digits_count_only_in_alnum_version():
    assert is_palindrome("a1b2a") is False
    assert is_letter_palindrome("a1b2a") is True


def test_remove_adjacent_duplicates_cancels_all():
    assert remove_adjacent_duplicates("abba") == ""


def test_remove_adjacent_duplicates_example():
    assert remove_adjacent_duplicates("azxxzy") == "ay"


@pytest.mark.parametrize("text", ["aabccbd", "mississippi", "xyz"])
def test_remove_adjacent_duplicates_no_neighbours(text):
    result = remove_adjacent_duplicates(text)
    assert all(a != b for a, b in zip(result, result[1:]))


def test_reverse_words_order():
    text = "  one two   three "
    assert reverse_words(text).split() == list(reversed(text.split()))


def test_reverse_words_round_trip():
    text = "alpha beta gamma"
    assert reverse_words(reverse_words(text)) == text


def test_reverse_string_round_trip():
    assert reverse_string(reverse_string(SAMPLE)) == SAMPLE
    assert reverse_string("racecar") == "racecar"


def test_remove_duplicate_letters_examples():
    assert remove_duplicate_letters("bcabc") == "abc"
    assert remove_duplicate_letters("cbacdcbc") == "acdb"


@pytest.mark.parametrize("text", ["bcabc", "cbacdcbc", "leetcode", "zzzaaa"])
def test_remove_duplicate_letters_invariants(text):
    result = remove_duplicate_letters(text)
    assert len(result) == len(set(result))
    assert set(result) == set(text)
    it = iter(text)
    assert all(ch in it for ch in result)