"""Bracket structure builder.

Builds the empty 63-game tree from seeded tournament data. Round of 64 games
take their teams straight from each region's roster (teams 2k and 2k+1 meet
in game k+1); every later game starts with both slots empty.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import replace

import config
from errors import ConfigurationError
from models.bracket import BracketTree, Game
from models.tournament import Region, TournamentData


def build_bracket(data: TournamentData) -> BracketTree:
    """Build the bracket skeleton (no winners yet).

    Raises:
        ConfigurationError: if the data does not describe 4 regions of 16 teams
    """
    check_tournament_data(data)

    regions = {}
    for region in data.regions:
        regions[region.position] = _build_region(region)

    final_four = (
        Game(id="final-four-1", round=config.FINAL_FOUR, game_number=1),
        Game(id="final-four-2", round=config.FINAL_FOUR, game_number=2),
    )
    championship = Game(id=config.CHAMPIONSHIP_ID, round=config.CHAMPIONSHIP, game_number=1)

    return BracketTree(
        regions=regions,
        final_four=final_four,
        championship=championship,
        region_names={r.position: r.name for r in data.regions},
    )


def _build_region(region: Region) -> tuple[Game, ...]:
    games = []
    for round_name in config.REGIONAL_ROUNDS:
        tag = config.ROUND_TAGS[round_name]
        for i in range(config.GAMES_PER_REGION[round_name]):
            game = Game(
                id=f"{region.position}-{tag}-{i + 1}",
                round=round_name,
                game_number=i + 1,
                region=region.position,
            )
            if round_name == config.ROUND_OF_64:
                # Seeding pairs are fixed here and never touched again
                game = replace(game, team1=region.teams[2 * i], team2=region.teams[2 * i + 1])
            games.append(game)
    return tuple(games)


def check_tournament_data(data: TournamentData):
    """Raise ConfigurationError unless the data can seed a 64-team bracket."""
    if len(data.regions) != config.NUM_REGIONS:
        raise ConfigurationError(
            f"Expected {config.NUM_REGIONS} regions, got {len(data.regions)}"
        )

    for region in data.regions:
        if len(region.teams) != config.TEAMS_PER_REGION:
            raise ConfigurationError(
                f"Region {region.name} ({region.position}) has {len(region.teams)} teams, "
                f"expected {config.TEAMS_PER_REGION}"
            )

    positions = [r.position for r in data.regions]
    unknown = [p for p in positions if p not in config.REGION_POSITIONS]
    if unknown:
        raise ConfigurationError(f"Unknown region position(s): {', '.join(unknown)}")
    repeated = [p for p, n in Counter(positions).items() if n > 1]
    if repeated:
        raise ConfigurationError(f"Region position used more than once: {', '.join(repeated)}")

    counts = Counter(team.id for team in data.all_teams())
    duplicates = sorted(team_id for team_id, n in counts.items() if n > 1)
    if duplicates:
        raise ConfigurationError(f"Team id(s) appear more than once: {', '.join(duplicates)}")


def all_bracket_games(bracket: BracketTree) -> list[Game]:
    return bracket.all_games()


def expected_game_ids(data: TournamentData) -> list[str]:
    """The 63 game ids a complete set of picks must cover."""
    return [game.id for game in all_bracket_games(build_bracket(data))]
