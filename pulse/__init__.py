"""PULSE - Professor Undergrad Learning & Student Evaluations."""

__version__ = "1.0.0"
