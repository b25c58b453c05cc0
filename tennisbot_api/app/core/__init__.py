"""Configuration, logging, SQLite access and the key‑value store."""
