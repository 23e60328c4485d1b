"""
Core utilities — cross-cutting concerns shared by ingestion and the API server.
"""
