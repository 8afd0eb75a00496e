"""
Email dispatch.

Provides the LanefulClient, which serializes email requests, sends them to
the Laneful API with a bearer token and decodes the response.
"""

from .client import LanefulClient

__all__ = ["LanefulClient"]
