"""
Rendering training summaries as text.

The layout is fixed: five lines in a fixed order, with distance, speed and
calories always shown to two decimal places. Only the wording changes
between locales.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from .models import TrainingActivity, TrainingSummary, TrainingType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportLabels:
    """Wording for one report language."""
    training_type: str
    duration: str
    minutes: str
    distance: str
    kilometres: str
    speed: str
    kmh: str
    calories: str
    training_names: dict[TrainingType, str]


LABELS: dict[str, ReportLabels] = {
    "en": ReportLabels(
        training_type="Training type",
        duration="Duration",
        minutes="min",
        distance="Distance",
        kilometres="km.",
        speed="Avg. speed",
        kmh="km/h",
        calories="Calories burned",
        training_names={
            TrainingType.RUNNING: "Running",
            TrainingType.WALKING: "Walking",
            TrainingType.SWIMMING: "Swimming",
        },
    ),
    "ru": ReportLabels(
        training_type="Тип тренировки",
        duration="Длительность",
        minutes="мин",
        distance="Дистанция",
        kilometres="км.",
        speed="Ср. скорость",
        kmh="км/ч",
        calories="Потрачено ккал",
        training_names={
            TrainingType.RUNNING: "Бег",
            TrainingType.WALKING: "Ходьба",
            TrainingType.SWIMMING: "Плавание",
        },
    ),
}

DEFAULT_LOCALE = "en"


def get_labels(locale: str = DEFAULT_LOCALE) -> ReportLabels:
    """Look up report wording, failing loudly on an unsupported locale."""
    try:
        return LABELS[locale.lower()]
    except KeyError:
        supported = ", ".join(sorted(LABELS))
        raise ValueError(f"Unsupported report locale '{locale}'. Supported: {supported}")


def format_minutes(minutes: float) -> str:
    """
    Minutes without artificial precision.

    Whole numbers print bare ("90"), anything else prints the shortest
    repr that round-trips ("22.5").
    """
    if float(minutes).is_integer():
        return str(int(minutes))
    return repr(float(minutes))


def format_summary(summary: TrainingSummary, labels: Optional[ReportLabels] = None) -> str:
    """Render a summary as the five-line report, ending with a newline."""
    labels = labels or get_labels()

    return (
        f"{labels.training_type}: {summary.type_label}\n"
        f"{labels.duration}: {format_minutes(summary.duration_minutes)} {labels.minutes}\n"
        f"{labels.distance}: {summary.distance_km:.2f} {labels.kilometres}\n"
        f"{labels.speed}: {summary.speed_kmh:.2f} {labels.kmh}\n"
        f"{labels.calories}: {summary.calories:.2f}\n"
    )


def describe(activity: TrainingActivity, labels: Optional[ReportLabels] = None) -> str:
    """
    Compute everything about a training and render it.

    Works with any TrainingActivity: a bare record reports zero calories,
    the sport variants report their own.
    """
    calories = activity.calories()
    summary = replace(activity.summarize(), calories=calories)

    logger.debug(
        "Described training",
        extra={
            "type_label": summary.type_label,
            "distance_km": summary.distance_km,
            "speed_kmh": summary.speed_kmh,
            "calories": calories,
        },
    )

    return format_summary(summary, labels)
