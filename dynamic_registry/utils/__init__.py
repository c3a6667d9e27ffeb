"""Logging, config and profiling helpers."""
