"""
Secret masking for secure logging and config summaries.
"""

from typing import Optional


def mask_secret(value: Optional[str], visible_chars: int = 4) -> str:
    """
    Mask secret value, keeping a few characters at each end.

    Args:
        value: Secret to mask
        visible_chars: Number of visible characters at start/end

    Returns:
        Masked string

    Example:
        >>> mask_secret("my-secret-api-key-12345", visible_chars=4)
        'my-s***2345'
        >>> mask_secret("short", visible_chars=2)
        '***'
    """
    if not value:
        return ""

    if len(value) <= (visible_chars * 2):
        return "***"

    return f"{value[:visible_chars]}***{value[-visible_chars:]}"
