"""
Core utilities for the metrics engine.

Modules:
    dates       — Date coercion, month windows, month labels
    formatting  — Half-up rounding, number conversion, display strings
"""
