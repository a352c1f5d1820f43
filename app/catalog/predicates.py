"""Predicate construction for catalog searches.

Every search field maps to one named comparison. A predicate built from
criteria is the conjunction of the comparisons for the fields that are set,
so criteria with nothing set match every game.
"""
from typing import Callable, Optional

from app.catalog.types import Game, SearchCriteria

Predicate = Callable[[Game], bool]


def _contains(value: Optional[str], needle: str) -> bool:
    """Case-insensitive substring test. An empty needle always matches."""
    if not needle:
        return True
    if value is None:
        return False
    return needle.casefold() in value.casefold()


def title_matches(needle: str) -> Predicate:
    return lambda game: _contains(game.title, needle)


def developer_matches(needle: str) -> Predicate:
    return lambda game: _contains(game.developer, needle)


def genre_matches(needle: str) -> Predicate:
    """Match when any of the game's genre tags contains the needle."""
    if not needle:
        return lambda game: True
    return lambda game: any(_contains(tag, needle) for tag in game.genres)


def price_range_predicate(low: Optional[float] = None, high: Optional[float] = None) -> Predicate:
    """Inclusive price bounds; a bound left as None is open."""
    def in_range(game: Game) -> bool:
        if low is not None and game.price < low:
            return False
        if high is not None and game.price > high:
            return False
        return True

    return in_range


def all_of(predicates: list[Predicate]) -> Predicate:
    """Conjunction of predicates. An empty list matches everything."""
    return lambda game: all(predicate(game) for predicate in predicates)


def build_predicate(criteria: SearchCriteria) -> Predicate:
    """Build the text predicate (title, developer, genre) for a search.

    Price bounds are applied separately through price_range_predicate.
    """
    predicates: list[Predicate] = []

    if criteria.title is not None:
        predicates.append(title_matches(criteria.title))
    if criteria.developer is not None:
        predicates.append(developer_matches(criteria.developer))
    if criteria.genre is not None:
        predicates.append(genre_matches(criteria.genre))

    return all_of(predicates)
