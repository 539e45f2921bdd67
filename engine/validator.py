"""Server-side validation for bracket submissions.

Every check runs on its own and adds to the error list, so one call reports
everything that is wrong with a submission. Nothing passed in is modified.

Final Four and Championship picks are only checked for naming a real team,
not for having actually advanced through the earlier picks. Picks that
break the chain of earlier picks are reported as warnings instead.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime

import pandas as pd

import config
from engine.builder import build_bracket
from engine.propagator import propagate
from models.bracket import BracketTree
from models.site_config import SiteConfig
from models.tournament import TournamentData


@dataclass
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"isValid": self.is_valid, "errors": list(self.errors), "warnings": list(self.warnings)}


def validate_submission(picks: dict[str, str], tie_breaker, data: TournamentData,
                        site_config: SiteConfig | None = None, now: datetime | None = None) -> ValidationResult:
    """Validate a bracket submission.

    Args:
        picks: {game_id: team_id} for the entrant's bracket
        tie_breaker: The entrant's tie breaker guess (number or numeric string)
        data: Tournament data the bracket was built from
        site_config: Read-only site settings (bounds, deadline, messages)
        now: Current time, for checking the deadline (defaults to the clock)

    Raises:
        ConfigurationError: if the tournament data itself is malformed
    """
    errors = []
    warnings = []

    # 1. Submission window
    closed, reason = submission_closed(site_config, now)
    if closed:
        errors.append(reason)

    # 2. Tie breaker
    tie_breaker_error = check_tie_breaker(tie_breaker, site_config)
    if tie_breaker_error:
        errors.append(tie_breaker_error)

    # 3. Expected bracket structure
    bracket = build_bracket(data)
    expected_ids = bracket.game_ids()

    if not isinstance(picks, dict):
        errors.append("Invalid picks data structure")
        return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

    missing = [game_id for game_id in expected_ids if not picks.get(game_id)]
    if missing:
        errors.append(f"Missing picks for {len(missing)} game(s)")

    # 4. Every picked team must exist
    valid_team_ids = data.team_ids()
    invalid = [
        f"Game {game_id}: invalid team ID {team_id}"
        for game_id, team_id in picks.items()
        if team_id and (not isinstance(team_id, str) or team_id not in valid_team_ids)
    ]
    if invalid:
        listed = ", ".join(invalid[:config.MAX_LISTED_INVALID_PICKS])
        more = len(invalid) - config.MAX_LISTED_INVALID_PICKS
        suffix = f"...and {more} more" if more > 0 else ""
        errors.append(f"Invalid team IDs found: {listed}{suffix}")

    # 5. Winners stay in their region; later games only need a real team
    errors.extend(_check_structure(picks, bracket, data, valid_team_ids))

    known_ids = set(expected_ids)
    unknown_ids = [game_id for game_id in picks if game_id not in known_ids]
    if unknown_ids:
        listed = ", ".join(unknown_ids[:config.MAX_LISTED_INVALID_PICKS])
        warnings.append(f"Ignoring {len(unknown_ids)} pick(s) for unknown game id(s): {listed}")

    warnings.extend(_check_advancement(picks, bracket, data, valid_team_ids))

    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


def submission_closed(site_config: SiteConfig | None, now: datetime | None = None) -> tuple[bool, str]:
    """Check the stop-submit toggle and deadline.

    Returns:
        (closed, reason). An unparseable deadline is ignored.
    """
    if site_config is None:
        return False, ""

    if site_config.stop_submit_toggle == "Yes":
        return True, site_config.final_message_submit_off or config.MESSAGE_SUBMIT_OFF

    if site_config.stop_submit_date_time:
        deadline = _parse_timestamp(site_config.stop_submit_date_time)
        if deadline is not None and _now_utc(now) >= deadline:
            return True, site_config.final_message_too_late or config.MESSAGE_TOO_LATE

    return False, ""


def check_tie_breaker(tie_breaker, site_config: SiteConfig | None) -> str | None:
    """Return an error message for a missing or out-of-range tie breaker."""
    if tie_breaker is None or (isinstance(tie_breaker, str) and not tie_breaker.strip()):
        return "Tie breaker is required"

    low = site_config.tie_breaker_low if site_config and site_config.tie_breaker_low is not None \
        else config.DEFAULT_TIE_BREAKER_LOW
    high = site_config.tie_breaker_high if site_config and site_config.tie_breaker_high is not None \
        else config.DEFAULT_TIE_BREAKER_HIGH

    value = None
    if not isinstance(tie_breaker, bool):
        try:
            value = float(tie_breaker)
        except (TypeError, ValueError):
            value = None

    if value is None or not math.isfinite(value) or value < low or value > high:
        return f"Tie breaker must be between {low} and {high}"
    return None


def _check_structure(picks: dict[str, str], bracket: BracketTree, data: TournamentData,
                     valid_team_ids: set[str]) -> list[str]:
    errors = []

    for position, games in bracket.regions.items():
        region = data.region_for(position)
        region_ids = region.team_ids() if region else set()
        for game in games:
            if game.round == config.ROUND_OF_64:
                continue
            winner = picks.get(game.id)
            if winner and isinstance(winner, str) and winner not in region_ids:
                errors.append(f"{game.round} game {game.id}: winner {winner} is not from this region")

    for game in bracket.final_four:
        winner = picks.get(game.id)
        if winner and isinstance(winner, str) and winner not in valid_team_ids:
            errors.append(f"Final Four game {game.id}: invalid team ID {winner}")

    winner = picks.get(bracket.championship.id)
    if winner and isinstance(winner, str) and winner not in valid_team_ids:
        errors.append(f"Championship game: invalid team ID {winner}")

    return errors


def _check_advancement(picks: dict[str, str], bracket: BracketTree, data: TournamentData,
                       valid_team_ids: set[str]) -> list[str]:
    """Warn about picks of a team that is not playing in that game."""
    warnings = []
    for game in propagate(bracket, picks, data).all_games():
        winner = picks.get(game.id)
        if not isinstance(winner, str) or winner not in valid_team_ids:
            continue
        if game.team1 is None or game.team2 is None:
            continue
        if not game.has_team(winner):
            team = data.find_team(winner)
            warnings.append(f"Pick for {game.id} ({team}) is not one of the teams playing in that game")
    return warnings


def _parse_timestamp(value: str) -> pd.Timestamp | None:
    ts = pd.to_datetime(value, utc=True, errors="coerce")
    if ts is None or pd.isna(ts):
        return None
    return ts


def _now_utc(now: datetime | None) -> pd.Timestamp:
    if now is None:
        return pd.Timestamp.now(tz="UTC")
    ts = pd.Timestamp(now)
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")
