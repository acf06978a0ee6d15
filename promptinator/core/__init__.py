"""
Core package for the Promptinator backend.

This package contains:
- config: Application settings and configuration
- catalog: Static prompt vocabulary (categories, lenses, camera bodies)
"""
