"""Fruit baskets and a football scores table built from dictionaries."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_GOALS_LIMIT = 255


class Fruit(enum.Enum):
    """Kinds of fruit that can go into a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds of fruit and at least five pieces."""
    basket = {"banana": 2}
    basket["apple"] = 3
    basket["mango"] = 1
    return basket


def fill_fruit_basket(basket: dict[Fruit, int]) -> dict[Fruit, int]:
    """Add one of every kind of fruit missing from ``basket``, leaving the rest alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)
    return basket


@dataclass
class Team:
    """A team with the goals it scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str, line: str) -> int:
    if not text.isascii() or not text.isdigit():
        raise ValueError(f"invalid goal count {text!r} in line {line!r}")
    goals = int(text)
    if goals > _GOALS_LIMIT:
        raise ValueError(f"goal count {goals} is too large in line {line!r}")
    return goals


def build_scores_table(results: str) -> dict[str, Team]:
    """Goals scored and conceded per team, from ``team1,team2,goals1,goals2`` lines."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"expected four comma separated fields in {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2], line)
        team_2_score = _parse_goals(fields[3], line)

        team_1 = scores.setdefault(team_1_name, Team(team_1_name))
        team_1.goals_scored += team_1_score
        team_1.goals_conceded += team_2_score

        team_2 = scores.setdefault(team_2_name, Team(team_2_name))
        team_2.goals_scored += team_2_score
        team_2.goals_conceded += team_1_score
    return scores