"""Scoring, ranking and finalization services."""
