"""
Generator configuration.

Configuration for classification, sentinel and normalization parameters used
when turning a mask into a signed distance field.
"""

import json
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Union, Dict, Any

_NUMBER = ((int, float), "a number")
_INTEGER = (int, "an integer")

_FIELD_TYPES = {
    "threshold": _NUMBER,
    "channel": _INTEGER,
    "saturation_divisor": _NUMBER,
    "far_component": _INTEGER,
    "num_workers": _INTEGER,
}


@dataclass
class GeneratorConfig:
    """
    Configuration for signed distance field generation.

    Attributes:
        threshold: Sample values below this are background, others foreground
        channel: Channel sampled from multi-channel images (1 = green)
        saturation_divisor: Distances saturate at HEIGHT / saturation_divisor
        far_component: Component K of the FAR sentinel vector (K, K)
        num_workers: Worker threads used to transform the two grids
    """
    threshold: int = 128
    """Classifier threshold on the sampled channel"""

    channel: int = 1
    """Channel index sampled from RGB(A) images"""

    saturation_divisor: float = 6.0
    """Empirical value; larger divisors give sharper fields"""

    far_component: int = 9999
    """Must be at least 2 * max(width, height) of every processed image"""

    num_workers: int = 2
    """Worker threads for the outside/inside fork-join, at least one per grid"""

    def __post_init__(self):
        """Validate configuration."""
        for f in fields(self):
            value = getattr(self, f.name)
            expected, description = _FIELD_TYPES[f.name]
            if isinstance(value, bool) or not isinstance(value, expected):
                raise ValueError(
                    f"{f.name} must be {description}, got {type(value).__name__} {value!r}"
                )

        if not 0 <= self.threshold <= 256:
            raise ValueError(f"threshold must be in [0, 256], got {self.threshold}")

        if self.channel < 0:
            raise ValueError(f"channel must be non-negative, got {self.channel}")

        if self.saturation_divisor <= 0:
            raise ValueError(
                f"saturation_divisor must be positive, got {self.saturation_divisor}"
            )

        if self.far_component <= 0:
            raise ValueError(f"far_component must be positive, got {self.far_component}")

        if self.num_workers < 2:
            raise ValueError(
                f"num_workers must be at least 2 to transform both grids concurrently, "
                f"got {self.num_workers}"
            )

    def max_distance(self, height: int) -> float:
        """Saturation distance in pixels for an image of the given height."""
        return height / self.saturation_divisor

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, params: Dict[str, Any]) -> "GeneratorConfig":
        """Build a config from a parameter dict, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(params) - known
        if unknown:
            raise ValueError(f"Unknown generator parameters: {sorted(unknown)}")
        return cls(**params)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "GeneratorConfig":
        """Load a config from a JSON params file."""
        with open(path, 'r') as f:
            params = json.load(f)
        if not isinstance(params, dict):
            raise ValueError(f"Expected a JSON object in {path}, got {type(params).__name__}")
        return cls.from_dict(params)
