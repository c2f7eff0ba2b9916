"""Configuration package for mushaf."""
