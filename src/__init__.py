"""
Training Calculator - distance, speed and calorie reports for workouts.

This package contains the complete application:
- core: Framework-agnostic training models, formulas and report
- config: Application configuration
- main: Driver that prints the sample trainings
"""

__version__ = "0.1.0"
