"""
Command-line entry point.

Builds the three sample trainings (a swim, a walk and a run) and prints
a report for each one.

For local use:
    python -m src.main

Set REPORT_LOCALE=ru for the Russian report.
"""

import logging
from datetime import timedelta

from .config.settings import get_settings
from .core.training.models import (
    LEN_STEP,
    SWIMMING_LEN_STEP,
    Running,
    Swimming,
    TrainingActivity,
    TrainingRecord,
    TrainingType,
    Walking,
)
from .core.training.report import DEFAULT_LOCALE, ReportLabels, describe, get_labels

logger = logging.getLogger(__name__)


def build_sample_trainings(labels: ReportLabels) -> list[TrainingActivity]:
    """The demo trainings, in print order."""
    names = labels.training_names

    swimming = Swimming(
        training=TrainingRecord(
            type_label=names[TrainingType.SWIMMING],
            repetitions=2000,
            # Distance still uses stroke length, not the pool laps below
            step_length_m=SWIMMING_LEN_STEP,
            duration=timedelta(minutes=90),
            weight_kg=85,
        ),
        pool_length_m=50,
        lap_count=5,
    )

    walking = Walking(
        training=TrainingRecord(
            type_label=names[TrainingType.WALKING],
            repetitions=20000,
            step_length_m=LEN_STEP,
            duration=timedelta(hours=3, minutes=45),
            weight_kg=85,
        ),
        height_cm=185,
    )

    running = Running(
        training=TrainingRecord(
            type_label=names[TrainingType.RUNNING],
            repetitions=5000,
            step_length_m=LEN_STEP,
            duration=timedelta(minutes=30),
            weight_kg=85,
        ),
    )

    return [swimming, walking, running]


def main() -> None:
    settings = get_settings()
    problems = settings.validate_fields()

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level.upper() if settings.log_level_known else logging.INFO,
    )

    if problems:
        logger.error(
            "Invalid configuration, falling back to defaults",
            extra={"problems": problems},
        )

    locale = settings.report_locale if settings.report_locale_supported else DEFAULT_LOCALE
    labels = get_labels(locale)

    logger.info(
        "%s starting",
        settings.app_name,
        extra={"report_locale": locale},
    )

    for training in build_sample_trainings(labels):
        print(describe(training, labels))


if __name__ == "__main__":
    main()
