"""Domain entities and API payload models."""
