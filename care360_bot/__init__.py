"""
Care360 bot: Telegram front-end for booking clinic appointments.
"""

__version__ = "1.0.0"
