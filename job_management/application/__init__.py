"""Application layer: request orchestration."""
