"""
Survey Pareto — weighted 80/20 analysis of survey-style tabular records.

Scores each row's answers, ranks the drivers that account for most of the
row's impact, and aggregates recurring findings across rows. Modular layout:
ingestion (record sources), analytics (scoring engine), API server.
"""

__version__ = "0.1.0"
