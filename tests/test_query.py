"""Tests for filtering game sequences"""
import pytest

from app.catalog import query
from app.catalog.types import SearchCriteria
from tests.conftest import titles


def test_search_without_criteria_returns_everything_in_order(sample_games):
    assert query.search(sample_games, SearchCriteria()) == sample_games


@pytest.mark.parametrize("needle", ["souls", "SOULS", "Dark Souls III", ""])
def test_by_title_matches_case_insensitively(sample_games, needle):
    result = query.by_title(sample_games, needle)

    assert "Dark Souls III" in titles(result)
    assert all(needle.casefold() in game.title.casefold() for game in result)


def test_by_title_without_match_is_empty(sample_games):
    assert query.by_title(sample_games, "halo") == []


def test_by_price_range_is_inclusive(sample_games):
    result = query.by_price_range(sample_games, 10, 60)

    assert "Stardew Valley" not in titles(result)
    assert titles(result) == [
        "Dark Souls III",
        "The Legend of Zelda: Breath of the Wild",
        "Baldur's Gate 3",
        "Hades",
        "Tetris Effect",
    ]
    assert titles(query.by_price_range(sample_games, 9.99, 9.99)) == ["Stardew Valley"]


def test_by_price_range_with_inverted_bounds_is_empty(sample_games):
    assert query.by_price_range(sample_games, 60, 10) == []


def test_combined_search(sample_games):
    criteria = SearchCriteria(genre="RPG", min_price=20, max_price=50)

    assert titles(query.search(sample_games, criteria)) == ["Baldur's Gate 3", "Hades"]


def test_adding_a_filter_narrows_the_result(sample_games):
    wide = query.search(sample_games, SearchCriteria(genre="RPG", min_price=20, max_price=50))
    narrow = query.search(sample_games, SearchCriteria(title="hades", genre="RPG", min_price=20, max_price=50))

    assert titles(narrow) == ["Hades"]
    assert set(titles(narrow)) <= set(titles(wide))


def test_single_price_bound(sample_games):
    assert titles(query.search(sample_games, SearchCriteria(max_price=10))) == ["Stardew Valley"]
    assert titles(query.search(sample_games, SearchCriteria(min_price=59.99))) == [
        "The Legend of Zelda: Breath of the Wild",
    ]


def test_filtering_does_not_change_games(sample_games):
    before = [game.model_dump() for game in sample_games]

    query.search(sample_games, SearchCriteria(title="a", genre="rpg", min_price=1))

    assert [game.model_dump() for game in sample_games] == before
