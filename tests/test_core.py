import dataclasses
import re

import pytest

from data_designer_writegood.core import (
    PASSIVE_IRREGULARS,
    PASSIVE_VERBS,
    Settings,
    analyze_text,
    find_duplicates,
    find_passive,
    find_weasels,
    scan_duplicate_words,
)


SCENARIO = "This was very clearly written."

MIXED_TEXT = "This was very clearly written. It was broken broken."


def _texts(matches):
    return [m.text for m in matches]


class TestWeaselWords:
    def test_scenario_sentence(self):
        assert _texts(find_weasels(SCENARIO)) == ["very", "clearly"]

    def test_reports_every_occurrence(self):
        assert _texts(find_weasels("Many people say very many things.", ignore_case=True)) == ["Many", "very", "many"]

    def test_case_sensitive_by_default(self):
        assert _texts(find_weasels("Many people say many things.")) == ["many"]

    def test_not_reported_inside_larger_words(self):
        assert find_weasels("They were variously employed by every team.") == []

    def test_multi_word_phrase_is_anchored_as_a_whole(self):
        assert _texts(find_weasels("There is a number of issues.")) == ["is a number"]
        assert find_weasels("This is a numbered list.") == []

    def test_range_limits_scan(self):
        text = "very good, very bad"
        matches = find_weasels(text, start=5)
        assert [(m.start, m.end) for m in matches] == [(11, 15)]

    def test_custom_word_list(self):
        settings = Settings(weasel_words=("arguably",))
        assert _texts(find_weasels("Arguably, it is arguably very fine.", settings)) == ["arguably"]

    def test_empty_word_list_matches_nothing(self):
        assert find_weasels("very very many", Settings(weasel_words=())) == []

    def test_edited_list_is_not_stale(self):
        first = Settings(weasel_words=("foo",))
        second = dataclasses.replace(first, weasel_words=("bar",))
        assert _texts(find_weasels("foo bar", first)) == ["foo"]
        assert _texts(find_weasels("foo bar", second)) == ["bar"]

    def test_malformed_list_fails_at_configuration(self):
        with pytest.raises(re.error):
            Settings(weasel_words=("(unclosed",))


class TestPassiveVoice:
    def test_every_verb_participle_pair_matches_once(self):
        for verb in PASSIVE_VERBS:
            for participle in PASSIVE_IRREGULARS:
                matches = find_passive(f"{verb} {participle}")
                assert len(matches) == 1, (verb, participle)

    def test_non_participle_is_not_reported(self):
        assert find_passive("He was happy.") == []
        assert find_passive("The ball was kicked.") == []

    def test_regular_participles_opt_in(self):
        settings = Settings(match_regular_participles=True)
        assert _texts(find_passive("The ball was kicked.", settings)) == ["was kicked"]

    def test_adverbs_break_the_construction(self):
        assert find_passive(SCENARIO) == []

    def test_quotes_between_verb_and_participle(self):
        assert _texts(find_passive('It was "broken" again.')) == ['was "broken']
        assert len(find_passive("It was `broken` again.")) == 1
        assert len(find_passive("It was\n  broken.")) == 1

    def test_verb_inside_word_is_ignored(self):
        assert find_passive("This broken vase.") == []

    def test_case_folding(self):
        assert find_passive("It Was written.") == []
        assert _texts(find_passive("It Was written.", ignore_case=True)) == ["Was written"]


class TestDuplicateWords:
    def test_single_duplicate(self):
        assert _texts(scan_duplicate_words("the the cat")) == ["the the"]
        assert _texts(find_duplicates("the the cat")) == ["the the"]

    def test_chained_duplicates_are_case_insensitive(self):
        assert _texts(scan_duplicate_words("the The the")) == ["the The", "The the"]

    def test_backreference_scan_consumes_both_words(self):
        assert _texts(find_duplicates("the The the")) == ["the The"]

    def test_non_adjacent_words(self):
        assert list(scan_duplicate_words("the cat the")) == []
        assert find_duplicates("the cat the") == []

    def test_word_prefix_is_not_a_duplicate(self):
        assert list(scan_duplicate_words("the theory")) == []
        assert find_duplicates("the theory") == []

    def test_punctuation_resets_adjacency(self):
        text = "I saw it. It was there."
        assert list(scan_duplicate_words(text)) == []
        assert find_duplicates(text) == []
        assert _texts(scan_duplicate_words(text, punctuation_resets=False)) == ["it. It"]

    def test_quotes_do_not_reset_adjacency(self):
        text = 'He said "said" twice.'
        assert len(list(scan_duplicate_words(text))) == 1
        assert len(find_duplicates(text)) == 1

    def test_range_starting_inside_a_word(self):
        assert find_duplicates("ethe the", start=1) == []
        assert list(scan_duplicate_words("ethe the", start=1)) == []

    def test_range_starting_at_a_word(self):
        assert _texts(scan_duplicate_words("x the the", start=2)) == ["the the"]
        assert _texts(find_duplicates("x the the", start=2)) == ["the the"]

    def test_across_lines(self):
        match = next(scan_duplicate_words("end of the\nthe next line"))
        assert (match.start, match.end) == (7, 14)


class TestAnalyzeText:
    def test_counts_by_category(self):
        result = analyze_text(MIXED_TEXT)
        assert result["counts"] == {"weasel": 2, "passive": 1, "duplicate": 1}
        assert result["issue_count"] == 4
        assert result["word_count"] == 9

    def test_issues_sorted_by_position(self):
        issues = analyze_text(MIXED_TEXT)["issues"]
        assert [i["start"] for i in issues] == sorted(i["start"] for i in issues)
        assert issues[0] == {"type": "Match", "category": "weasel", "text": "very", "start": 9, "end": 13}

    def test_result_shape(self):
        result = analyze_text(MIXED_TEXT)
        expected_keys = {"issue_count", "counts", "issues", "word_count", "reading_ease", "grade_level"}
        assert expected_keys == set(result.keys())

    def test_empty_text(self):
        result = analyze_text("")
        assert result["issue_count"] == 0
        assert result["issues"] == []
        assert result["reading_ease"] is None
