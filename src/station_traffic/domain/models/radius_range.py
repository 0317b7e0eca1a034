"""Radius range domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RadiusRange:
    """Output range of the radius scale, in pixels."""

    lower: float
    upper: float

    def __post_init__(self) -> None:
        if self.lower < 0:
            raise ValueError(f"radius lower bound must be non-negative, got {self.lower}")
        if self.upper < self.lower:
            raise ValueError(
                f"radius upper bound ({self.upper}) must not be below lower bound ({self.lower})"
            )
