"""Tournament loader - define the four seeded regions.

Supports:
1. Interactive CLI entry
2. JSON file input (the tournament-{year}.json shape)
"""

import json
import os

import config
from errors import ConfigurationError
from models.team import Team
from models.tournament import Region, TournamentData


def load_tournament_interactive() -> TournamentData:
    """Interactively enter the 64-team field via CLI prompts.

    Teams are entered in bracket order, so teams 1-2 meet in the first
    Round of 64 game, teams 3-4 in the second, and so on.
    """
    print("\n=== TOURNAMENT ENTRY ===")
    print("Enter 16 teams per region in bracket order (e.g. seeds 1, 16, 8, 9, 5, 12, ...).\n")

    regions = []
    for region_idx, position in enumerate(config.REGION_POSITIONS):
        region_name = input(f"{position} region name [{config.REGION_NAMES[region_idx]}]: ").strip()
        if not region_name:
            region_name = config.REGION_NAMES[region_idx]

        teams = []
        for slot in range(config.TEAMS_PER_REGION):
            name = input(f"  {region_name} team {slot + 1} name: ").strip()
            seed = input(f"  {region_name} team {slot + 1} seed: ").strip()
            teams.append(Team(id=_team_id(name), seed=int(seed), name=name))

        regions.append(Region(position=position, name=region_name, teams=tuple(teams)))
        print(f"  -> {region_name} loaded with {len(teams)} teams\n")

    return TournamentData(regions=tuple(regions))


def load_tournament_from_json(filepath: str) -> TournamentData:
    """Load tournament data from a JSON file.

    Expected format:
    {
        "year": "2026",
        "regions": [
            {
                "position": "top-left",
                "name": "East",
                "teams": [{"id": "duke", "seed": 1, "name": "Duke"}, ...]
            },
            ...
        ]
    }

    Raises:
        ConfigurationError: if the file is missing or not in this shape
    """
    if not os.path.exists(filepath):
        raise ConfigurationError(f"Tournament data file not found: {filepath}")

    with open(filepath, "r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Tournament data file {filepath} is not valid JSON: {e}") from e

    data = TournamentData.from_dict(raw)
    print(f"Loaded tournament from {filepath}: {len(data.all_teams())} teams in {len(data.regions)} regions")
    return data


def save_tournament_to_json(data: TournamentData, filepath: str):
    """Save tournament data to JSON."""
    os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data.to_dict(), f, indent=2)
    print(f"Saved tournament to {filepath}")


def _team_id(name: str) -> str:
    return "-".join(name.lower().replace(".", "").replace("'", "").split())
