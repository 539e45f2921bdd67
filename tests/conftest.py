# tests/conftest.py
import json

import pytest

import config
from engine.builder import build_bracket
from engine.propagator import propagate
from models.team import Team
from models.tournament import Region, TournamentData

# Standard bracket order within a region
SEED_ORDER = [1, 16, 8, 9, 5, 12, 4, 13, 6, 11, 3, 14, 7, 10, 2, 15]


def make_region(position: str, name: str) -> Region:
    teams = tuple(
        Team(id=f"{name.lower()}-{seed}", seed=seed, name=f"{name} Team {seed}")
        for seed in SEED_ORDER
    )
    return Region(position=position, name=name, teams=teams)


def make_tournament(order=None) -> TournamentData:
    """Four regions: East top-left, West bottom-left, South top-right, Midwest bottom-right."""
    regions = [make_region(pos, name) for pos, name in zip(config.REGION_POSITIONS, config.REGION_NAMES)]
    if order:
        regions = [regions[i] for i in order]
    return TournamentData(regions=tuple(regions), year="2026")


def make_chalk_picks(data: TournamentData) -> dict[str, str]:
    """Better seed wins every game (team1 on a tie)."""
    skeleton = build_bracket(data)
    picks = {}
    for round_name in config.ROUND_ORDER:
        bracket = propagate(skeleton, picks, data)
        for game in bracket.games_by_round(round_name):
            winner = game.team1 if game.team1.seed <= game.team2.seed else game.team2
            picks[game.id] = winner.id
    return picks


@pytest.fixture
def tournament():
    return make_tournament()


@pytest.fixture
def skeleton(tournament):
    return build_bracket(tournament)


@pytest.fixture
def chalk_picks(tournament):
    return make_chalk_picks(tournament)


@pytest.fixture
def tournament_file(tmp_path, tournament):
    path = tmp_path / "tournament-2026.json"
    path.write_text(json.dumps(tournament.to_dict()), encoding="utf-8")
    return path
