import pytest

from data_designer_writegood.readability import count_syllables, grade_level, reading_ease, text_statistics


class TestSyllables:
    @pytest.mark.parametrize(
        "word, expected",
        [("cat", 1), ("the", 1), ("make", 1), ("table", 2), ("agree", 2), ("beautiful", 3), ("Reading", 2)],
    )
    def test_vowel_groups(self, word, expected):
        assert count_syllables(word) == expected

    def test_no_letters(self):
        assert count_syllables("") == 0
        assert count_syllables("123") == 0


class TestScores:
    def test_statistics(self):
        stats = text_statistics("The cat sat. The dog ran!")
        assert (stats.words, stats.sentences, stats.syllables) == (6, 2, 6)

    def test_missing_terminator_counts_as_one_sentence(self):
        assert text_statistics("hello world").sentences == 1

    def test_reading_ease(self):
        assert reading_ease("The cat sat.") == pytest.approx(119.19)

    def test_grade_level(self):
        assert grade_level("The cat sat.") == pytest.approx(-2.62)

    def test_longer_words_read_harder(self):
        assert reading_ease("Extraordinary considerations necessitate deliberation.") < reading_ease("The cat sat.")

    def test_empty_text(self):
        assert reading_ease("") is None
        assert grade_level("   ") is None
