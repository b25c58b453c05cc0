"""
Top‑level package for the TennisBot order API.

The package exists so that modules inside ``app`` can be imported with
fully qualified names such as ``tennisbot_api.app.main``, both when the
service is started through ``run.py`` and when the tests are collected
from the repository root.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
