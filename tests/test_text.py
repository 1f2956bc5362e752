import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algobox.text import is_balanced, kmp_search


def _occurrences(text, pattern):
    return [m.start() for m in re.finditer(f"(?={re.escape(pattern)})", text)]


def test_kmp_source_example():
    assert kmp_search("ABCABAABCABAC", "CAB") == [2, 8]


def test_kmp_empty_pattern_reports_shift_zero():
    assert kmp_search("ABC", "") == [0]


def test_kmp_pattern_longer_than_text():
    assert kmp_search("AB", "ABC") == []


def test_kmp_finds_overlapping_matches():
    assert kmp_search("aaaa", "aa") == _occurrences("aaaa", "aa")


@given(st.text(alphabet="ab", max_size=30), st.text(alphabet="ab", min_size=1, max_size=5))
def test_kmp_agrees_with_regex(text, pattern):
    assert kmp_search(text, pattern) == _occurrences(text, pattern)


@given(st.text(alphabet="abc", max_size=30), st.text(alphabet="abc", min_size=1, max_size=4))
def test_kmp_shifts_are_real_matches(text, pattern):
    for shift in kmp_search(text, pattern):
        assert text[shift : shift + len(pattern)] == pattern


@pytest.mark.parametrize("text", ["", "()", "{[()]}", "([]{})", "a(b)c[d]{e}", "plain"])
def test_balanced_strings(text):
    assert is_balanced(text)


@pytest.mark.parametrize("text", ["(", ")", "(]", "([)]", "{{}", "}{", "a)b("])
def test_unbalanced_strings(text):
    assert not is_balanced(text)


_balanced = st.recursive(
    st.just(""),
    lambda inner: st.one_of(
        st.tuples(st.sampled_from(["()", "[]", "{}"]), inner).map(
            lambda pair: pair[0][0] + pair[1] + pair[0][1]
        ),
        st.tuples(inner, inner).map(lambda pair: pair[0] + pair[1]),
    ),
    max_leaves=10,
)


@given(_balanced)
def test_generated_balanced_strings(text):
    assert is_balanced(text)


@given(_balanced.filter(bool))
def test_dropping_last_bracket_unbalances(text):
    assert not is_balanced(text[:-1])