"""Application layer: use-case services and realtime fan-out."""
