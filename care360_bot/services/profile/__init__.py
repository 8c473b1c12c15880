"""
Profile service module.
"""

from .service import ProfileDirectory

__all__ = ["ProfileDirectory"]
