"""Utility modules for Iamport Client."""

from .sanitizer import (
    mask_sensitive_data,
    is_sensitive_key,
    add_sensitive_keys,
)

__all__ = [
    'mask_sensitive_data',
    'is_sensitive_key',
    'add_sensitive_keys',
]
