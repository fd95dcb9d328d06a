"""
Environment configuration for Iamport Client.

Load client options from .env files, environment variables and YAML/JSON files.

Example:
    >>> from iamport_client.core.env_config import load_from_env, ConfigFileLoader
    >>>
    >>> options = load_from_env()
    >>> options = ConfigFileLoader.from_file("config.json", section="AppSettings:Iamport")
"""

from .loader import load_from_env, load_settings, print_config_summary
from .validator import IamportSettings
from .file_loader import ConfigFileLoader
from .secrets import mask_secret

__all__ = [
    # Loaders
    "load_from_env",
    "load_settings",
    "print_config_summary",
    "ConfigFileLoader",
    # Settings
    "IamportSettings",
    # Secrets
    "mask_secret",
]
