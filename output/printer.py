"""Pretty-print bracket output."""

from tabulate import tabulate

import config
from engine.validator import ValidationResult
from models.bracket import BracketTree, Game
from models.tournament import TournamentData

TBD = "TBD"


def _team_label(team) -> str:
    return str(team) if team is not None else TBD


def _game_row(game: Game, picks: dict[str, str], data: TournamentData) -> list[str]:
    winner = data.find_team(picks.get(game.id))
    return [game.id, _team_label(game.team1), _team_label(game.team2), str(winner) if winner else ""]


def print_bracket(bracket: BracketTree, picks: dict[str, str], data: TournamentData):
    """Print a (propagated) bracket region by region.

    Args:
        bracket: Output of propagate()
        picks: The picks the bracket was propagated from
        data: Tournament data, to show picked winners by name
    """
    headers = ["Game", "Team 1", "Team 2", "Pick"]

    print("\n" + "=" * 60)
    print("           BRACKET")
    print("=" * 60)

    for position, games in bracket.regions.items():
        region_name = bracket.region_names.get(position, position)
        print(f"\n--- {region_name.upper()} REGION ({position}) ---")

        for round_name in config.REGIONAL_ROUNDS:
            rows = [_game_row(g, picks, data) for g in games if g.round == round_name]
            print(f"\n  {round_name}:")
            print(tabulate(rows, headers=headers, tablefmt="simple"))

    print(f"\n{'=' * 60}")
    print("           FINAL FOUR")
    print("=" * 60)

    rows = []
    for game in bracket.final_four:
        row = _game_row(game, picks, data)
        # Final Four teams carry their region name
        row[1] = f"{row[1]} [{game.team1.region}]" if game.team1 else row[1]
        row[2] = f"{row[2]} [{game.team2.region}]" if game.team2 else row[2]
        rows.append(row)
    rows.append(_game_row(bracket.championship, picks, data))
    print(tabulate(rows, headers=headers, tablefmt="simple"))

    champion = data.find_team(picks.get(bracket.championship.id))
    print(f"\n  CHAMPION: {champion if champion else TBD}")

    made = sum(1 for g in bracket.all_games() if picks.get(g.id))
    print(f"  Picks made: {made}/{config.NUM_GAMES}")
    print("=" * 60)


def print_validation(result: ValidationResult):
    """Print a validation result as itemized errors and warnings."""
    if result.is_valid:
        print("\nBracket is valid and ready to submit.")
    else:
        print(f"\nBracket is NOT valid ({len(result.errors)} error(s)):")
    for error in result.errors:
        print(f"  ERROR:   {error}")
    for warning in result.warnings:
        print(f"  WARNING: {warning}")
