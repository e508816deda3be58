"""
Metrics — Pure-function views over the Record Store collections.

Each module takes DataFrames and returns dicts / lists. No I/O, no state.

Modules:
    summary          — QTD revenue vs. quarter target
    drivers          — Pipeline Value, Win Rate, Avg Deal Size, Sales Cycle
    reps             — Per-rep win rate
    risks            — Stale deals, low win rate reps, inactive accounts
    recommendations  — Risk -> action mapping
    trend            — Six-month revenue vs. target
"""
