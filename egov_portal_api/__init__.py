"""
Top-level package for the public e-services portal API.

This file makes ``egov_portal_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``egov_portal_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
