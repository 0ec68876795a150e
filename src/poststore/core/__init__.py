"""Core data model, store and manifest for poststore."""
