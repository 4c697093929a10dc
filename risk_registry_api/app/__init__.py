"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Request handling is split into layers: ``api`` holds the
versioned routers, ``services`` the business logic, ``schemas`` the
pydantic models and ``core`` the configuration, logging, error
handling and the in-memory record store.
"""

from .main import app, create_app  # noqa: F401
