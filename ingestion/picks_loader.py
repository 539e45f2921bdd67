"""Load and save an entrant's picks.

Picks are a flat {game_id: team_id} map. They can come from a JSON file
(either the bare map or a saved submission with "picks" and "tieBreaker")
or from a CSV export with game_id and team_id columns.
"""

import json
import os

import pandas as pd


def load_picks_from_json(filepath: str) -> tuple[dict[str, str], str | None]:
    """Load picks and, when present, the tie breaker.

    Returns:
        (picks, tie_breaker) where tie_breaker is None for a bare picks map
    """
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    tie_breaker = None
    if isinstance(data.get("picks"), dict):
        tie_breaker = data.get("tieBreaker", data.get("tie_breaker"))
        data = data["picks"]

    picks = {str(game_id): str(team_id) for game_id, team_id in data.items() if team_id}
    print(f"Loaded {len(picks)} picks from {filepath}")
    return picks, tie_breaker


def load_picks_from_csv(filepath: str) -> dict[str, str]:
    """Load picks from a CSV with game_id and team_id columns.

    Blank team ids are skipped. A repeated game id keeps its last row.
    """
    df = pd.read_csv(filepath, dtype=str).fillna("")
    df.columns = [c.strip().lower() for c in df.columns]

    picks = {}
    for _, row in df.iterrows():
        game_id = row["game_id"].strip()
        team_id = row["team_id"].strip()
        if game_id and team_id:
            picks[game_id] = team_id

    print(f"Loaded {len(picks)} picks from {filepath}")
    return picks


def load_picks(filepath: str) -> tuple[dict[str, str], str | None]:
    """Load picks from .json or .csv, picking the reader by extension."""
    if filepath.lower().endswith(".csv"):
        return load_picks_from_csv(filepath), None
    return load_picks_from_json(filepath)


def save_picks_to_json(picks: dict[str, str], filepath: str, tie_breaker=None):
    """Save picks (and optionally the tie breaker) as a submission JSON."""
    data = {"picks": dict(picks)}
    if tie_breaker is not None:
        data["tieBreaker"] = tie_breaker

    os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    print(f"Saved {len(picks)} picks to {filepath}")
