"""
API package containing the HTTP routes.

``router`` in ``api/router.py`` bundles every resource router; the
resources themselves live in ``api/endpoints``.
"""
