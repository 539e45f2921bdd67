"""Bracket data structure.

The bracket is a fixed-shape tree of 63 games:
- Each of the 4 regions holds 15 games, stored in round order:
  8 Round of 64, 4 Round of 32, 2 Sweet 16, 1 Elite 8
- 2 Final Four games pair the region winners
- 1 Championship game

Within a region, game k (1-based) of round n+1 is fed by games 2k-1 and 2k
of round n. Game ids follow "{position}-{r64|r32|s16|e8}-{gameNumber}",
then "final-four-1", "final-four-2" and "championship".

A BracketTree is an immutable value. Filling in teams produces a new tree
(see engine.propagator) rather than changing an existing one.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import config
from models.team import Team


@dataclass(frozen=True)
class Game:
    id: str
    round: str
    game_number: int
    region: str | None = None  # region position; None for Final Four / Championship
    team1: Team | None = None
    team2: Team | None = None

    def teams(self) -> list[Team]:
        """The resolved teams in this game (0, 1 or 2)."""
        return [t for t in (self.team1, self.team2) if t is not None]

    def has_team(self, team_id: str) -> bool:
        return any(t.id == team_id for t in self.teams())

    def to_dict(self) -> dict:
        out = {"id": self.id, "round": self.round, "gameNumber": self.game_number}
        if self.region is not None:
            out["region"] = self.region
        if self.team1 is not None:
            out["team1"] = self.team1.to_dict()
        if self.team2 is not None:
            out["team2"] = self.team2.to_dict()
        return out


@dataclass(frozen=True)
class BracketTree:
    """A 64-team tournament bracket."""

    regions: dict[str, tuple[Game, ...]]  # position -> 15 games in round order
    final_four: tuple[Game, Game]
    championship: Game
    region_names: dict[str, str] = field(default_factory=dict, compare=False)  # position -> display name

    def all_games(self) -> list[Game]:
        """All 63 games: regional games, then Final Four, then Championship."""
        games = []
        for region_games in self.regions.values():
            games.extend(region_games)
        games.extend(self.final_four)
        games.append(self.championship)
        return games

    def games_by_round(self, round_name: str) -> list[Game]:
        return [g for g in self.all_games() if g.round == round_name]

    def regional_games(self, position: str, round_name: str) -> list[Game]:
        return [g for g in self.regions.get(position, ()) if g.round == round_name]

    def get_game(self, game_id: str) -> Game | None:
        for game in self.all_games():
            if game.id == game_id:
                return game
        return None

    def game_ids(self) -> list[str]:
        return [g.id for g in self.all_games()]

    def feeder_ids(self, game_id: str) -> tuple[str, str] | None:
        """Ids of the two games whose winners play in this game, or None for Round of 64."""
        if game_id == config.CHAMPIONSHIP_ID:
            return self.final_four[0].id, self.final_four[1].id
        if game_id in config.FINAL_FOUR_PAIRINGS:
            left, right = config.FINAL_FOUR_PAIRINGS[game_id]
            return self.regional_games(left, config.ELITE_8)[0].id, self.regional_games(right, config.ELITE_8)[0].id
        game = self.get_game(game_id)
        if game is None or game.round == config.ROUND_OF_64:
            return None
        prev_round = config.ROUND_ORDER[config.ROUND_ORDER.index(game.round) - 1]
        prev_games = self.regional_games(game.region, prev_round)
        k = game.game_number - 1
        return prev_games[2 * k].id, prev_games[2 * k + 1].id

    def is_complete(self) -> bool:
        """Check if both slots of every game are filled."""
        return all(g.team1 is not None and g.team2 is not None for g in self.all_games())

    def to_dict(self) -> dict:
        return {
            "regions": {pos: [g.to_dict() for g in games] for pos, games in self.regions.items()},
            "finalFour": [g.to_dict() for g in self.final_four],
            "championship": self.championship.to_dict(),
        }
