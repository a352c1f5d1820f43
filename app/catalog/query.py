"""Filtering of game sequences. Results keep the order of the input."""
from typing import Iterable

from app.catalog.predicates import Predicate, build_predicate, price_range_predicate
from app.catalog.types import Game, SearchCriteria


def apply(games: Iterable[Game], predicate: Predicate) -> list[Game]:
    """Return the games matching predicate, in input order."""
    return [game for game in games if predicate(game)]


def search(games: Iterable[Game], criteria: SearchCriteria) -> list[Game]:
    """Filter by the text criteria and, when given, the inclusive price bounds."""
    matches = apply(games, build_predicate(criteria))

    if criteria.min_price is not None or criteria.max_price is not None:
        matches = apply(matches, price_range_predicate(criteria.min_price, criteria.max_price))

    return matches


def by_price_range(games: Iterable[Game], low: float, high: float) -> list[Game]:
    """Games priced within [low, high]. Empty when low > high."""
    return apply(games, price_range_predicate(low, high))


def by_title(games: Iterable[Game], title: str) -> list[Game]:
    return search(games, SearchCriteria(title=title))
