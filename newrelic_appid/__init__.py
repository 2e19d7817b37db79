"""
Lookup of a New Relic application ID for CI pipelines.

The package resolves an application name to its numeric identifier through the
New Relic REST API v2 and publishes it as a pipeline output.
"""

__all__ = []
