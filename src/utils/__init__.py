"""
Utility modules for the waitlist server
"""
from .config_loader import MAX_BODY_BYTES, Settings, load_settings

__all__ = [
    'MAX_BODY_BYTES',
    'Settings',
    'load_settings',
]
