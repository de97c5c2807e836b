"""
Domain models for training metrics.

A training is described by a shared record (what was done, for how long,
by whom) plus whatever a specific sport needs on top of it. Each sport
computes calories its own way, and swimming also measures speed by pool
geometry instead of stroke length.

Nothing here does I/O. Every model is frozen: a training is a fact about
the past, and its summary is derived from it on demand.
"""

import math
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Protocol


M_IN_KM = 1000
MIN_IN_HOURS = 60
CM_IN_M = 100

LEN_STEP = 0.65  # metres per running/walking step
SWIMMING_LEN_STEP = 1.38  # metres per swimming stroke


class InvalidTrainingInput(ValueError):
    """Raised when a training is constructed from impossible values."""
    pass


class TrainingType(Enum):
    """The sports we know how to count calories for."""
    RUNNING = "running"
    WALKING = "walking"
    SWIMMING = "swimming"


def _require_non_negative(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidTrainingInput(f"{name} must be a finite number, got {value}")
    if value < 0:
        raise InvalidTrainingInput(f"{name} cannot be negative, got {value}")


@dataclass(frozen=True)
class TrainingSummary:
    """
    Everything the report shows about one training.

    Built by summarize() and thrown away after formatting.
    """
    type_label: str
    duration: timedelta
    distance_km: float
    speed_kmh: float
    calories: float

    @property
    def duration_minutes(self) -> float:
        return self.duration.total_seconds() / 60


class TrainingActivity(Protocol):
    """
    What every kind of training can tell us about itself.

    The report only talks to this interface, so it doesn't care whether
    it got a run, a walk, a swim, or a bare record.
    """

    def distance(self) -> float:
        """Distance covered, in km."""
        ...

    def mean_speed(self) -> float:
        """Average speed, in km/h."""
        ...

    def calories(self) -> float:
        """Energy spent, in kcal."""
        ...

    def summarize(self) -> TrainingSummary:
        """Collect the derived metrics into a summary."""
        ...


# ---------------------------------------------------------------------------
# Shared record
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TrainingRecord:
    """
    Fields every training has, and the formulas they share.

    A repetition is whatever the sport counts: steps when running or
    walking, strokes when swimming. On its own the record is an
    unspecialized training, so it burns no calories.
    """
    type_label: str
    repetitions: int
    step_length_m: float
    duration: timedelta
    weight_kg: float

    def __post_init__(self) -> None:
        _require_non_negative("Repetitions", self.repetitions)
        _require_non_negative("Step length", self.step_length_m)
        _require_non_negative("Weight", self.weight_kg)
        if self.duration < timedelta(0):
            raise InvalidTrainingInput("Duration cannot be negative")

    @property
    def duration_hours(self) -> float:
        return self.duration.total_seconds() / 3600

    def distance(self) -> float:
        return self.repetitions * self.step_length_m / M_IN_KM

    def mean_speed(self) -> float:
        """
        Average speed in km/h.

        A zero-length training has a speed of 0 rather than failing.
        """
        if self.duration_hours == 0:
            return 0
        return self.distance() / self.duration_hours

    def calories(self) -> float:
        return 0

    def summarize(self) -> TrainingSummary:
        return build_summary(self, self)


def build_summary(record: TrainingRecord, activity: TrainingActivity) -> TrainingSummary:
    """Summary with the record's shared fields and the activity's metrics."""
    return TrainingSummary(
        type_label=record.type_label,
        duration=record.duration,
        distance_km=activity.distance(),
        speed_kmh=activity.mean_speed(),
        calories=activity.calories(),
    )


# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------

RUNNING_SPEED_MULTIPLIER = 18
RUNNING_SPEED_SHIFT = 1.79


@dataclass(frozen=True)
class Running:
    """A run. Calories grow with speed, weight and time."""
    training: TrainingRecord

    def distance(self) -> float:
        return self.training.distance()

    def mean_speed(self) -> float:
        return self.training.mean_speed()

    def calories(self) -> float:
        duration_min = self.training.duration_hours * MIN_IN_HOURS
        speed_modifier = RUNNING_SPEED_MULTIPLIER * self.mean_speed() + RUNNING_SPEED_SHIFT
        return speed_modifier * self.training.weight_kg / M_IN_KM * duration_min

    def summarize(self) -> TrainingSummary:
        return build_summary(self.training, self)


# ---------------------------------------------------------------------------
# Walking
# ---------------------------------------------------------------------------

WALKING_WEIGHT_MULTIPLIER = 0.035
WALKING_SPEED_HEIGHT_MULTIPLIER = 0.029
KMH_IN_MSEC = 0.278


@dataclass(frozen=True)
class Walking:
    """
    A walk. The calorie formula depends on the walker's height.

    Height divides the speed term, so it must be positive. We reject
    bad heights here instead of letting calories() return inf or nan.
    """
    training: TrainingRecord
    height_cm: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.height_cm) and self.height_cm > 0):
            raise InvalidTrainingInput(f"Height must be a positive number, got {self.height_cm}")

    def distance(self) -> float:
        return self.training.distance()

    def mean_speed(self) -> float:
        return self.training.mean_speed()

    def calories(self) -> float:
        speed_ms = self.mean_speed() * KMH_IN_MSEC
        height_m = self.height_cm / CM_IN_M
        duration_min = self.training.duration_hours * MIN_IN_HOURS
        weight = self.training.weight_kg

        speed_term = speed_ms ** 2 / height_m * WALKING_SPEED_HEIGHT_MULTIPLIER * weight
        return (WALKING_WEIGHT_MULTIPLIER * weight + speed_term) * duration_min

    def summarize(self) -> TrainingSummary:
        return build_summary(self.training, self)


# ---------------------------------------------------------------------------
# Swimming
# ---------------------------------------------------------------------------

SWIMMING_SPEED_SHIFT = 1.1
SWIMMING_WEIGHT_MULTIPLIER = 2


@dataclass(frozen=True)
class Swimming:
    """
    A pool swim.

    Speed comes from pool geometry (pool length times laps), while
    distance still comes from strokes times stroke length. The two are
    tracked independently on purpose, so they can disagree.
    """
    training: TrainingRecord
    pool_length_m: int
    lap_count: int

    def __post_init__(self) -> None:
        _require_non_negative("Pool length", self.pool_length_m)
        _require_non_negative("Lap count", self.lap_count)

    def distance(self) -> float:
        return self.training.distance()

    def mean_speed(self) -> float:
        duration_hours = self.training.duration_hours
        if duration_hours == 0:
            return 0
        return self.pool_length_m * self.lap_count / M_IN_KM / duration_hours

    def calories(self) -> float:
        return (
            (self.mean_speed() + SWIMMING_SPEED_SHIFT)
            * SWIMMING_WEIGHT_MULTIPLIER
            * self.training.weight_kg
            * self.training.duration_hours
        )

    def summarize(self) -> TrainingSummary:
        return build_summary(self.training, self)
