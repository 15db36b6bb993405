"""Tests for the emotion lexicon and lexicon join."""

import pandas as pd
import pytest

from politemo.errors import MissingReferenceDataError
from politemo.lexicon import Category, EmotionLexicon, join_lexicon, load_lexicon


@pytest.fixture
def lexicon():
    """Small in-memory lexicon."""
    return EmotionLexicon.from_pairs([
        ("war", "negative"),
        ("war", "anger"),
        ("happy", "joy"),
        ("happy", "positive"),
        ("happy", "joy"),
        ("tax", "unknown-category"),
    ])


class TestCategory:
    """Tests for Category enum."""

    def test_ten_categories(self):
        """Test that there are eight emotions and two sentiments."""
        assert len(Category) == 10
        assert sum(1 for c in Category if c.is_sentiment) == 2

    def test_schema_order(self):
        """Test the fixed category order."""
        assert [c.value for c in Category][:3] == ["anger", "anticipation", "disgust"]
        assert list(Category)[-1] is Category.TRUST


class TestEmotionLexicon:
    """Tests for EmotionLexicon."""

    def test_categories_sorted_and_deduplicated(self, lexicon):
        """Test that categories follow schema order without duplicates."""
        assert lexicon.categories_for("war") == (Category.ANGER, Category.NEGATIVE)
        assert lexicon.categories_for("happy") == (Category.JOY, Category.POSITIVE)

    def test_unknown_category_skipped(self, lexicon):
        """Test that unknown category names are ignored."""
        assert "tax" not in lexicon
        assert len(lexicon) == 2

    def test_absent_word(self, lexicon):
        """Test that an absent word has no categories."""
        assert lexicon.categories_for("budget") == ()

    def test_words_in(self, lexicon):
        """Test listing words for a category."""
        assert lexicon.words_in(Category.JOY) == ["happy"]
        assert lexicon.words_in(Category.TRUST) == []

    def test_immutable_entries(self, lexicon):
        """Test that the mapping cannot be modified."""
        with pytest.raises(TypeError):
            lexicon.entries["new"] = (Category.JOY,)

    def test_get_stats(self, lexicon):
        """Test lexicon statistics."""
        stats = lexicon.get_stats()

        assert stats["total_words"] == 2
        assert stats["total_associations"] == 4
        assert stats["category_counts"]["joy"] == 1
        assert stats["category_counts"]["fear"] == 0


class TestLoadLexicon:
    """Tests for load_lexicon."""

    def test_nrc_wordlevel(self, sample_lexicon_file):
        """Test loading the NRC word-level format."""
        lexicon = load_lexicon(sample_lexicon_file)

        assert lexicon.categories_for("war") == (
            Category.ANGER,
            Category.FEAR,
            Category.NEGATIVE,
            Category.SADNESS,
        )
        assert lexicon.categories_for("doubt") == (Category.FEAR, Category.NEGATIVE)

    def test_nrc_zero_association_dropped(self, sample_lexicon_file):
        """Test that rows with association 0 are not loaded."""
        lexicon = load_lexicon(sample_lexicon_file)

        assert "political" not in lexicon
        assert Category.TRUST not in lexicon.categories_for("doubt")

    def test_word_sentiment_csv(self, tmp_path):
        """Test loading a CSV with word and sentiment columns."""
        path = tmp_path / "nrc.csv"
        path.write_text("word,sentiment\nabandon,fear\nabandon,sadness\nnull,negative\n")

        lexicon = load_lexicon(path)

        assert lexicon.categories_for("abandon") == (Category.FEAR, Category.SADNESS)
        assert lexicon.categories_for("null") == (Category.NEGATIVE,)

    def test_csv_missing_columns(self, tmp_path):
        """Test that a CSV without the expected columns is rejected."""
        path = tmp_path / "nrc.csv"
        path.write_text("term,emotion\nabandon,fear\n")

        with pytest.raises(MissingReferenceDataError):
            load_lexicon(path)

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises MissingReferenceDataError."""
        with pytest.raises(MissingReferenceDataError) as exc_info:
            load_lexicon(tmp_path / "missing.txt")

        assert exc_info.value.kind == "Lexicon"


class TestJoinLexicon:
    """Tests for join_lexicon."""

    def test_absent_token_produces_no_rows(self, lexicon):
        """Test that words not in the lexicon are dropped."""
        tokens = pd.DataFrame({"id": ["1"], "word": ["budget"]})

        assert len(join_lexicon(tokens, lexicon)) == 0

    def test_two_categories_produce_two_rows(self, lexicon):
        """Test that a word with two categories fans out to two rows."""
        tokens = pd.DataFrame({"id": ["1"], "word": ["war"]})

        joined = join_lexicon(tokens, lexicon)

        assert len(joined) == 2
        assert joined["category"].tolist() == ["anger", "negative"]
        assert joined["id"].tolist() == ["1", "1"]

    def test_order(self, lexicon):
        """Test token order then category order."""
        tokens = pd.DataFrame({
            "id": ["1", "1", "2"],
            "word": ["happy", "budget", "war"],
        })

        joined = join_lexicon(tokens, lexicon)

        assert list(zip(joined["word"], joined["category"])) == [
            ("happy", "joy"),
            ("happy", "positive"),
            ("war", "anger"),
            ("war", "negative"),
        ]
        assert joined.index.tolist() == [0, 1, 2, 3]

    def test_category_subset(self, lexicon):
        """Test restricting the join to selected categories."""
        tokens = pd.DataFrame({"word": ["happy", "war"]})

        joined = join_lexicon(tokens, lexicon, categories={Category.POSITIVE, Category.NEGATIVE})

        assert joined["category"].tolist() == ["positive", "negative"]

    def test_empty_tokens(self, lexicon):
        """Test joining an empty token table."""
        tokens = pd.DataFrame({"id": [], "word": []})

        joined = join_lexicon(tokens, lexicon)

        assert joined.empty
        assert "category" in joined.columns

    def test_input_not_modified(self, lexicon):
        """Test that the token table is left unchanged."""
        tokens = pd.DataFrame({"word": ["war"]})

        join_lexicon(tokens, lexicon)

        assert list(tokens.columns) == ["word"]
