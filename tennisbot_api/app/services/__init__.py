"""
Service layer.

Each service encapsulates the business logic for one entity on top of
the key‑value store, so the HTTP handlers stay free of storage details.
"""
