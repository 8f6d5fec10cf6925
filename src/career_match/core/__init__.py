"""Core data models for Career Match."""
