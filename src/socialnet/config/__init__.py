"""
Configuration layer for socialnet.

Configuration is explicit (passed, not global) and immutable once built.
"""

from socialnet.config.settings import LoaderConfig, SocialNetConfig

__all__ = [
    "LoaderConfig",
    "SocialNetConfig",
]
