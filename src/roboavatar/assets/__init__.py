"""Asset catalog access and deterministic selection."""
