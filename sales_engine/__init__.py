"""
sales_engine — Metrics engine for the sales analytics dashboard.

Submodules:
    - config:    Fixed paths, reporting windows and thresholds
    - records:   Record Store (JSON collections loaded into DataFrames)
    - core:      Date and formatting helpers
    - metrics:   Pure-function metric views (summary, drivers, risks, ...)
    - analyzer:  SalesAnalyzer, the single entry point for all views
"""
