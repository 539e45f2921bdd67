"""Pick propagation.

Fills in the teams of every game after the Round of 64 from a flat map of
picks ({game_id: winning team_id}). The result is recomputed from scratch on
each call, so a changed pick never leaves stale teams behind.

Propagation is lenient: a missing, dangling or unknown pick just leaves the
slot empty (shown as TBD). Strict checks belong to engine.validator.
"""

from __future__ import annotations

from dataclasses import replace

import config
from models.bracket import BracketTree, Game
from models.tournament import Region, TournamentData


def propagate(bracket: BracketTree, picks: dict[str, str] | None, data: TournamentData) -> BracketTree:
    """Return a new bracket with later-round teams derived from the picks.

    Args:
        bracket: A bracket from build_bracket (any teams beyond the Round of 64 are ignored)
        picks: {game_id: team_id}
        data: The tournament the bracket was built from
    """
    picks = picks or {}

    regions = {}
    for position, games in bracket.regions.items():
        regions[position] = _propagate_region(games, data.region_for(position), picks)

    # Final Four: regional champions, paired by position
    final_four = []
    for game in bracket.final_four:
        left, right = config.FINAL_FOUR_PAIRINGS.get(game.id, (None, None))
        final_four.append(replace(
            game,
            team1=_regional_champion(regions, data, left, picks),
            team2=_regional_champion(regions, data, right, picks),
        ))

    # Championship: Final Four winners, looked up across the whole field
    championship = replace(
        bracket.championship,
        team1=data.find_team(picks.get(final_four[0].id)),
        team2=data.find_team(picks.get(final_four[1].id)),
    )

    return BracketTree(
        regions=regions,
        final_four=tuple(final_four),
        championship=championship,
        region_names=dict(bracket.region_names),
    )


def _propagate_region(games: tuple[Game, ...], region: Region | None, picks: dict[str, str]) -> tuple[Game, ...]:
    by_round = {r: [g for g in games if g.round == r] for r in config.REGIONAL_ROUNDS}

    out = list(by_round[config.ROUND_OF_64])
    previous = by_round[config.ROUND_OF_64]
    for round_name in config.REGIONAL_ROUNDS[1:]:
        current = []
        for k, game in enumerate(by_round[round_name]):
            team1 = team2 = None
            if region is not None and 2 * k + 1 < len(previous):
                team1 = region.find_team(picks.get(previous[2 * k].id))
                team2 = region.find_team(picks.get(previous[2 * k + 1].id))
            current.append(replace(game, team1=team1, team2=team2))
        out.extend(current)
        previous = current
    return tuple(out)


def _regional_champion(regions: dict[str, tuple[Game, ...]], data: TournamentData, position: str | None,
                       picks: dict[str, str]):
    if position is None:
        return None
    region = data.region_for(position)
    elite_8 = [g for g in regions.get(position, ()) if g.round == config.ELITE_8]
    if region is None or not elite_8:
        return None
    team = region.find_team(picks.get(elite_8[0].id))
    if team is None:
        return None
    return team.with_region(region.name)


def next_game_id(bracket: BracketTree, game_id: str) -> str | None:
    """The game the winner of game_id plays in next (None after the Championship)."""
    for game in bracket.all_games():
        feeders = bracket.feeder_ids(game.id)
        if feeders and game_id in feeders:
            return game.id
    return None


def apply_pick(bracket: BracketTree, picks: dict[str, str], game_id: str, team_id: str) -> dict[str, str]:
    """Return a new picks map with game_id won by team_id.

    If the game previously had a different winner, later picks of that old
    winner are cleared, since the team can no longer get there.
    """
    updated = dict(picks)
    old_winner = updated.get(game_id)
    updated[game_id] = team_id

    if old_winner and old_winner != team_id:
        downstream = next_game_id(bracket, game_id)
        while downstream is not None:
            if updated.get(downstream) == old_winner:
                del updated[downstream]
            downstream = next_game_id(bracket, downstream)

    return updated
