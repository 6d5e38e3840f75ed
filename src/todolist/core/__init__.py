"""Core wiring: ports (Protocols) and the per-session AppState."""
