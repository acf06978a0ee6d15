"""
API package for the Promptinator backend.

Endpoints are organized by functionality under ``api.endpoints``; every
router is mounted below ``/api``.
"""
