"""
Configuration module for the Storefront API.
"""
from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
