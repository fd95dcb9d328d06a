"""
Configuration loader from environment variables and .env files.
"""

from typing import Optional

from ..config import IamportClientOptions
from .validator import IamportSettings

_OPTION_FIELDS = (
    "account_id",
    "api_key",
    "api_secret",
    "authorization_header_name",
    "base_url",
)


def load_settings(env_file: Optional[str] = None) -> IamportSettings:
    """Read IamportSettings, from ``env_file`` if given, else from ``.env``."""
    if env_file is not None:
        return IamportSettings(_env_file=env_file)
    return IamportSettings()


def load_from_env(
    env_file: Optional[str] = None,
    **overrides
) -> IamportClientOptions:
    """
    Load IamportClientOptions from environment variables.

    Priority (highest to lowest):
    1. **overrides - explicit parameters
    2. Environment variables (IAMPORT_*)
    3. .env file
    4. Defaults

    Args:
        env_file: Custom .env file path
        **overrides: Explicit option values (account_id, api_key, ...)

    Returns:
        Validated IamportClientOptions

    Raises:
        InvalidArgumentError: A required value is missing everywhere

    Example:
        >>> options = load_from_env()
        >>> options = load_from_env(base_url="https://sandbox.example.com")
    """
    settings = load_settings(env_file)

    values = {
        name: overrides.get(name, getattr(settings, name))
        for name in _OPTION_FIELDS
    }
    return IamportClientOptions(**values)


def print_config_summary(options: IamportClientOptions) -> None:
    """Print options with secrets masked."""
    print("Iamport client configuration:")
    for key, value in options.masked().items():
        print(f"  {key}: {value}")
