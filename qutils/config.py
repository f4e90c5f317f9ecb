"""
Configuration for qutils.

Logger settings can be given in code or loaded from a JSON file:

    {"time_zone": "Europe/London", "include_time": true}
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class LoggerConfig:
    """Settings for the timestamped logger."""
    time_zone: Optional[str] = None  # IANA zone name; None = system local time
    include_time: bool = True

    def to_dict(self) -> dict:
        d = {"include_time": self.include_time}
        if self.time_zone:
            d["time_zone"] = self.time_zone
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "LoggerConfig":
        return cls(
            time_zone=data.get("time_zone"),
            include_time=data.get("include_time", True),
        )

    @classmethod
    def load(cls, path: Path) -> "LoggerConfig":
        """Load settings from file, falling back to defaults."""
        if path.exists():
            try:
                with open(path) as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return cls.from_dict(data)
                print(f"Warning: Ignoring {path.name}: expected a JSON object")
            except (json.JSONDecodeError, IOError) as e:
                print(f"Warning: Could not load {path.name}: {e}")

        return cls()

    def save(self, path: Path):
        """Save settings to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
