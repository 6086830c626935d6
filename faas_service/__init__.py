"""In-memory FAAS data service."""
