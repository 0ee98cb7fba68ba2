"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, storage, errors),
``schemas`` (request and response models), ``services`` (business
rules) and ``api`` (HTTP routes).  The single‑page UI is shipped in
``static``.
"""

from .main import app  # noqa: F401
