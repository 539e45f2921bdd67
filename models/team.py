"""Team data model."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Team:
    id: str
    seed: int
    name: str
    region: str | None = None  # set on Final Four teams to show where they came from

    def __str__(self):
        return f"({self.seed}) {self.name}"

    def with_region(self, region: str) -> Team:
        return replace(self, region=region)

    @classmethod
    def from_dict(cls, data: dict) -> Team:
        return cls(
            id=str(data["id"]),
            seed=int(data["seed"]),
            name=data["name"],
            region=data.get("region"),
        )

    def to_dict(self) -> dict:
        out = {"id": self.id, "seed": self.seed, "name": self.name}
        if self.region is not None:
            out["region"] = self.region
        return out
