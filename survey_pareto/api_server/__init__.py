"""
API server package — HTTP interface to the Pareto engine.

Fetches records (sheet, JSON payload or CSV upload), runs the analysis and
returns the result envelope the dashboard renders.
"""
