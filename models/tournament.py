"""Tournament reference data: the four regions and their seeded teams."""

from __future__ import annotations

from dataclasses import dataclass, field

from errors import ConfigurationError
from models.team import Team


def normalize_position(position: str) -> str:
    """Turn "Top Left" / "top_left" / "top-left" into "top-left"."""
    return "-".join(position.strip().lower().replace("_", " ").replace("-", " ").split())


@dataclass(frozen=True)
class Region:
    position: str
    name: str
    teams: tuple[Team, ...]

    def find_team(self, team_id: str | None) -> Team | None:
        if not team_id:
            return None
        for team in self.teams:
            if team.id == team_id:
                return team
        return None

    def team_ids(self) -> set[str]:
        return {team.id for team in self.teams}

    @classmethod
    def from_dict(cls, data: dict) -> Region:
        return cls(
            position=normalize_position(data["position"]),
            name=data["name"],
            teams=tuple(Team.from_dict(t) for t in data["teams"]),
        )

    def to_dict(self) -> dict:
        return {
            "position": self.position,
            "name": self.name,
            "teams": [team.to_dict() for team in self.teams],
        }


@dataclass(frozen=True)
class TournamentData:
    regions: tuple[Region, ...]
    year: str | None = None
    name: str | None = None
    extra: dict = field(default_factory=dict, compare=False)  # passthrough keys (finalFour, metadata)

    def all_teams(self) -> list[Team]:
        """All teams, region by region, in roster order."""
        return [team for region in self.regions for team in region.teams]

    def team_ids(self) -> set[str]:
        return {team.id for team in self.all_teams()}

    def region_for(self, position: str) -> Region | None:
        for region in self.regions:
            if region.position == position:
                return region
        return None

    def find_team(self, team_id: str | None) -> Team | None:
        if not team_id:
            return None
        for team in self.all_teams():
            if team.id == team_id:
                return team
        return None

    @classmethod
    def from_dict(cls, data: dict) -> TournamentData:
        """Parse the tournament JSON shape.

        Expected format:
        {
            "year": "2026",
            "regions": [
                {"position": "top-left", "name": "East",
                 "teams": [{"id": "duke", "seed": 1, "name": "Duke"}, ...]},
                ...
            ]
        }
        """
        if not isinstance(data, dict) or not isinstance(data.get("regions"), list):
            raise ConfigurationError("Tournament data must be an object with a 'regions' list")
        try:
            regions = tuple(Region.from_dict(r) for r in data["regions"])
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Malformed region in tournament data: {e!r}") from e
        extra = {k: v for k, v in data.items() if k not in ("regions", "year", "name")}
        year = data.get("year")
        return cls(
            regions=regions,
            year=str(year) if year is not None else None,
            name=data.get("name"),
            extra=extra,
        )

    def to_dict(self) -> dict:
        out = dict(self.extra)
        if self.year is not None:
            out["year"] = self.year
        if self.name is not None:
            out["name"] = self.name
        out["regions"] = [region.to_dict() for region in self.regions]
        return out
