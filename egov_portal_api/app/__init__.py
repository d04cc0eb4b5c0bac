"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The project is organised into logical pieces: ``core``
holds configuration, logging, errors and the in-memory store,
``schemas`` the request models, ``services`` the business logic and
``api/v1/endpoints`` one router per domain.
"""

from .main import app  # noqa: F401
