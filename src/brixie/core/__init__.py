"""Core client functionality for Brixie."""
