"""
Upstream clinic API module.
"""

from .service import UpstreamClient

__all__ = ["UpstreamClient"]
