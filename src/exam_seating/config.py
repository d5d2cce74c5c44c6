"""Seating configuration loader."""

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Self

from .constants import DEFAULT_CONFIG_FILENAME, MIN_ID_PADDING, PLACEHOLDER_PREFIX
from .models import AllocationMode, SeatingType


@dataclass
class SeatingConfig:
    """Tunable defaults for allocation runs.

    Attributes:
        placeholder_prefix: Prefix for synthesized ids of sets whose label is not numeric
        min_id_padding: Minimum zero padding of synthesized sequence numbers
        mode: Default allocation mode
        seating_type: Default seating type
    """

    placeholder_prefix: str = PLACEHOLDER_PREFIX
    min_id_padding: int = MIN_ID_PADDING
    mode: AllocationMode = AllocationMode.CLASSIC
    seating_type: SeatingType = SeatingType.FAIR

    def __post_init__(self) -> None:
        self.mode = AllocationMode.parse(self.mode)
        self.seating_type = SeatingType.parse(self.seating_type)
        if self.min_id_padding < 1:
            raise ValueError(f"min_id_padding must be positive, got {self.min_id_padding}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a config from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "placeholder_prefix": self.placeholder_prefix,
            "min_id_padding": self.min_id_padding,
            "mode": self.mode.value,
            "seating_type": self.seating_type.value,
        }


def load_config(path: Path | str | None = None) -> SeatingConfig:
    """Load seating configuration from a JSON file.

    Args:
        path: Path to the config file. When omitted, ``seating-config.json``
              in the working directory is used if it exists.

    Returns:
        SeatingConfig with file values applied over the defaults
    """
    config_path = Path(path) if path else Path(DEFAULT_CONFIG_FILENAME)
    if not config_path.exists():
        if path:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return SeatingConfig()

    with open(config_path, encoding="utf-8") as f:
        return SeatingConfig.from_dict(json.load(f))
