"""Core infrastructure: settings, database engines, ORM models, utilities."""
