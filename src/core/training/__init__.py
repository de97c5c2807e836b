"""
Training metrics logic.

Contains the training models, the calorie formulas for each sport, and
the text report.
"""

from .models import (
    InvalidTrainingInput,
    Running,
    Swimming,
    TrainingActivity,
    TrainingRecord,
    TrainingSummary,
    TrainingType,
    Walking,
)
from .report import ReportLabels, describe, format_summary, get_labels

__all__ = [
    "InvalidTrainingInput",
    "Running",
    "Swimming",
    "TrainingActivity",
    "TrainingRecord",
    "TrainingSummary",
    "TrainingType",
    "Walking",
    "ReportLabels",
    "describe",
    "format_summary",
    "get_labels",
]
