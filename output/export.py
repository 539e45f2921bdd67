"""Pick export in bracket fill-in order.

Picks are listed region by region, round by round, then the Final Four and
Championship, which is the order most bracket sites present them.
"""

import csv

import config
from models.bracket import BracketTree, Game
from models.tournament import TournamentData


def fill_in_order(bracket: BracketTree) -> list[Game]:
    """Games in fill-in order: each region's rounds, then Final Four, then Championship."""
    games = []
    for position in bracket.regions:
        for round_name in config.REGIONAL_ROUNDS:
            games.extend(bracket.regional_games(position, round_name))
    games.extend(bracket.final_four)
    games.append(bracket.championship)
    return games


def print_fill_in_order(bracket: BracketTree, picks: dict[str, str], data: TournamentData):
    """Print picks in fill-in order."""
    print("\n" + "=" * 60)
    print("    BRACKET FILL-IN ORDER")
    print("=" * 60)

    pick_num = 0
    current_section = None

    for game in fill_in_order(bracket):
        section = bracket.region_names.get(game.region, game.region) if game.region else "Final Four"
        if section != current_section:
            print(f"\n--- {section.upper()} ---")
            current_section = section

        winner = data.find_team(picks.get(game.id))
        if winner:
            pick_num += 1
            print(f"  {pick_num:2d}. {game.round:<13s} {winner}")

    print(f"\n  Total picks: {pick_num}")
    print("=" * 60)


def export_picks_csv(bracket: BracketTree, picks: dict[str, str], data: TournamentData, filepath: str):
    """Export picks as a CSV file.

    Columns: pick_number, round, region, game_id, seed, team
    """
    with open(filepath, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["pick_number", "round", "region", "game_id", "seed", "team"])

        pick_num = 0
        for game in fill_in_order(bracket):
            winner = data.find_team(picks.get(game.id))
            if winner:
                pick_num += 1
                region = bracket.region_names.get(game.region, game.region) if game.region else "Final Four"
                writer.writerow([pick_num, game.round, region, game.id, winner.seed, winner.name])

    print(f"Exported {pick_num} picks to {filepath}")
