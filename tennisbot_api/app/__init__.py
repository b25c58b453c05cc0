"""
Application package for the TennisBot order API.

``core`` holds configuration, logging, the SQLite connection and the
key‑value store; ``schemas`` the pydantic payloads; ``services`` the
order, inquiry and statistics logic; ``api`` the versioned FastAPI
routers.
"""

from .main import app  # noqa: F401
