"""Shared settings and telemetry."""
