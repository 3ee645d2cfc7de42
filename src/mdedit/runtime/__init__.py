"""Runtime services: settings and telemetry."""
