"""Alert — pacing / physiological thresholds monitored during an exercise.

Closed set of nine variants. Heart rate is in bpm, power in watts, cadence
in rpm; speed carries its own unit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from workout_planner.models.enums import SpeedUnit


@dataclass(frozen=True)
class HeartRateRangeAlert:
    low: float
    high: float

    kind: ClassVar[str] = "heart_rate_range"

    def describe(self) -> str:
        return f"HR {int(self.low)}-{int(self.high)} BPM"


@dataclass(frozen=True)
class HeartRateZoneAlert:
    zone: int

    kind: ClassVar[str] = "heart_rate_zone"

    def describe(self) -> str:
        return f"HR Zone {self.zone}"


@dataclass(frozen=True)
class PowerRangeAlert:
    low: float
    high: float

    kind: ClassVar[str] = "power_range"

    def describe(self) -> str:
        return f"Power {int(self.low)}-{int(self.high)} W"


@dataclass(frozen=True)
class PowerThresholdAlert:
    value: float

    kind: ClassVar[str] = "power_threshold"

    def describe(self) -> str:
        return f"Power {int(self.value)} W"


@dataclass(frozen=True)
class PowerZoneAlert:
    zone: int

    kind: ClassVar[str] = "power_zone"

    def describe(self) -> str:
        return f"Power Zone {self.zone}"


@dataclass(frozen=True)
class CadenceRangeAlert:
    low: float
    high: float

    kind: ClassVar[str] = "cadence_range"

    def describe(self) -> str:
        return f"Cadence {int(self.low)}-{int(self.high)} RPM"


@dataclass(frozen=True)
class CadenceThresholdAlert:
    value: float

    kind: ClassVar[str] = "cadence_threshold"

    def describe(self) -> str:
        return f"Cadence {int(self.value)} RPM"


@dataclass(frozen=True)
class SpeedRangeAlert:
    low: float
    high: float
    unit: SpeedUnit = SpeedUnit.KILOMETERS_PER_HOUR

    kind: ClassVar[str] = "speed_range"

    def describe(self) -> str:
        return f"Speed {self.low:.1f}-{self.high:.1f} {self.unit.value}"


@dataclass(frozen=True)
class SpeedThresholdAlert:
    value: float
    unit: SpeedUnit = SpeedUnit.KILOMETERS_PER_HOUR

    kind: ClassVar[str] = "speed_threshold"

    def describe(self) -> str:
        return f"Speed {self.value:.1f} {self.unit.value}"


Alert = Union[
    HeartRateRangeAlert,
    HeartRateZoneAlert,
    PowerRangeAlert,
    PowerThresholdAlert,
    PowerZoneAlert,
    CadenceRangeAlert,
    CadenceThresholdAlert,
    SpeedRangeAlert,
    SpeedThresholdAlert,
]

ALERT_TYPES: tuple[type, ...] = (
    HeartRateRangeAlert,
    HeartRateZoneAlert,
    PowerRangeAlert,
    PowerThresholdAlert,
    PowerZoneAlert,
    CadenceRangeAlert,
    CadenceThresholdAlert,
    SpeedRangeAlert,
    SpeedThresholdAlert,
)
