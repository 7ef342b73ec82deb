"""Two-segment badge geometry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bounds:
    """Pixel geometry of a badge.

    ``subject_x`` and ``status_x`` are text anchors (centers). The +1/-1 nudges
    match the shields.io look and are not configurable.
    """

    subject_dx: float
    subject_x: float
    status_dx: float
    status_x: float

    @property
    def dx(self) -> float:
        return self.subject_dx + self.status_dx


def compute_bounds(subject_dx: float, status_dx: float) -> Bounds:
    return Bounds(
        subject_dx=subject_dx,
        subject_x=subject_dx / 2.0 + 1,
        status_dx=status_dx,
        status_x=subject_dx + status_dx / 2.0 - 1,
    )
