"""
Core enums, exceptions and models for the Care360 bot.
"""
