"""
Teacher Evaluation Server.

Collects student evaluations of teachers, classifies free-text feedback and
aggregates per-teacher results for reporting.
"""

__version__ = "0.1.0"
