"""HTTP adapter for the Q&A review core."""
