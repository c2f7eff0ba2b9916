"""Shared utilities for mushaf."""
