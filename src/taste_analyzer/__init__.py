"""Taste Analyzer - classify listening taste into World End Tree branches."""

__version__ = "0.1.0"
