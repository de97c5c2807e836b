"""
Core business logic for training metrics.

This module is framework-agnostic: it doesn't read configuration or
write output. The driver in main.py does both, which keeps the formulas
testable in isolation.
"""
