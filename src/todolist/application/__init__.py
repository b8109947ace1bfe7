"""Application layer: orchestration on top of the domain."""
