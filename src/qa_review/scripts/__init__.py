"""Operational scripts for the Q&A review service."""
