"""Tests for the prioritized category classifier."""
import pytest

from budgetbot.services.parser.categorizer import (
    CategoriesNotLoadedError,
    Category,
    Categorizer,
    CategorySet,
    compare_categories,
    parse_lexemes,
)
from budgetbot.services.providers import StaticCategoryProvider

from .conftest import fruits, others, sweets


class TestClassify:

    def test_priority_wins(self, categorizer):
        """banana (Fruits, 20) и chocolates (Sweets, 10): меньший priority важнее."""
        assert categorizer.classify_text("10 for banana chocolates").name == "Sweets"

    def test_ignore_case(self, categorizer):
        assert categorizer.classify_text("10 for BANANA Chocolates").name == "Sweets"

    def test_single_match(self, categorizer):
        assert categorizer.classify_text("apples 3,50").name == "Fruits"

    def test_default_category(self, categorizer):
        assert categorizer.classify_text("10 for tea").name == "Others"

    def test_default_when_others_loaded_first(self):
        cs = CategorySet()
        cs.add(others())
        cs.add(sweets())
        cs.add(fruits())
        assert cs.freeze().classify_text("10 for tea").name == "Others"

    def test_classify_is_total(self, categorizer):
        for text in ["", "42", "...", "tea coffee"]:
            assert categorizer.classify_text(text) is not None

    def test_amounts_and_signs_are_not_matched(self):
        c = Categorizer([
            Category.from_row(1, "Numbers", "4"),
            Category.from_row(9, "Rest", "rest"),
        ])
        assert c.classify_text("42 tea.").name == "Rest"

    def test_lexeme_is_prefix_of_word_not_reverse(self, categorizer):
        # "can" короче лексемы "cand" — не совпадает
        assert categorizer.classify_text("5 can").name == "Others"
        assert categorizer.classify_text("5 candies").name == "Sweets"


class TestCategory:

    def test_match_word(self):
        assert sweets().match_word("candy")
        assert not sweets().match_word("apple")

    def test_match_word_ignore_case(self):
        assert sweets().match_word("CanDy")

    def test_parse_lexemes_trims_lowercases_and_drops_empty(self):
        assert parse_lexemes(" Cand, SWEET,,chocolate ,") == ("cand", "sweet", "chocolate")
        assert parse_lexemes("") == ()
        assert parse_lexemes(None) == ()

    def test_category_without_lexemes_matches_nothing(self):
        assert not Category.from_row(1, "Empty", "").match_word("anything")

    def test_ordering(self):
        a = Category.from_row(10, "Alpha", "")
        b = Category.from_row(10, "Beta", "")
        c = Category.from_row(20, "Zeta", "")
        assert compare_categories(a, c) < 0
        # равный приоритет: важнее лексически большее имя
        assert compare_categories(b, a) < 0
        assert compare_categories(a, a) == 0
        assert [x.name for x in Categorizer([c, a, b]).categories] == ["Beta", "Alpha", "Zeta"]

    def test_equal_priority_tie_break_in_classify(self):
        c = Categorizer([
            Category.from_row(10, "Alpha", "tea"),
            Category.from_row(10, "Beta", "tea"),
            Category.from_row(99, "Rest", ""),
        ])
        assert c.classify_text("tea 3").name == "Beta"


class TestCategorySet:

    def test_duplicates_are_dropped(self):
        cs = CategorySet()
        assert cs.add(Category.from_row(10, "Sweets", "cand"))
        assert not cs.add(Category.from_row(10, "Sweets", "cake"))
        assert len(cs) == 1
        # побеждает первая вставка
        c = cs.freeze()
        assert c.classify_text("cand 1").name == "Sweets"
        assert c.classify_text("cake 1").name == "Sweets"  # единственная категория = default
        assert c.categories[0].lexemes == ("cand",)

    def test_same_name_different_priority_is_not_duplicate(self):
        cs = CategorySet()
        cs.add(Category.from_row(10, "Sweets", "cand"))
        cs.add(Category.from_row(11, "Sweets", "cake"))
        assert len(cs) == 2

    def test_load_from_provider(self):
        provider = StaticCategoryProvider([(10, "Sweets", "cand"), (10, "Sweets", "x"), (99, "Others", "")])
        cs = CategorySet()
        assert cs.load(provider) == 2

    def test_freeze_without_categories_fails_loudly(self):
        with pytest.raises(CategoriesNotLoadedError):
            CategorySet().freeze()

    def test_categorizer_without_categories_fails_loudly(self):
        with pytest.raises(CategoriesNotLoadedError):
            Categorizer([])

    def test_from_provider(self):
        c = Categorizer.from_provider(StaticCategoryProvider([(20, "Fruits", "apple"), (999, "Others", "")]))
        assert c.classify_text("apple 1").name == "Fruits"
        assert c.default_category.name == "Others"
