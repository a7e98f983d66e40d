"""Q&A review and reputation service."""
