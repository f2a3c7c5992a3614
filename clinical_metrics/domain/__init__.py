"""Domain models for the clinical metrics engine."""
