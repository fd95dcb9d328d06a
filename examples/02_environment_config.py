"""
Configuration Examples

Shows every way to build client options: code, environment variables,
.env files, YAML/JSON files, plus structured logging.

Example .env:
    IAMPORT_ACCOUNT_ID=imp12345678
    IAMPORT_API_KEY=1234567890123456
    IAMPORT_API_SECRET=secret
    IAMPORT_LOG_LEVEL=DEBUG
    IAMPORT_LOG_FORMAT=json
"""

import asyncio

from iamport_client import (
    ConfigFileLoader,
    IamportClientOptions,
    IamportHttpClient,
    LoggingConfig,
    RequestsTransport,
    TimeoutConfig,
    UsersApi,
    load_from_env,
)
from iamport_client.core.env_config import print_config_summary
from iamport_client.models import IamportTokenRequest


def from_code():
    print("\n=== From Code ===")
    options = IamportClientOptions(
        account_id="imp12345678",
        api_key="1234567890123456",
        api_secret="secret",
    )
    print_config_summary(options)


def from_mapping():
    print("\n=== From Mapping ===")
    options = IamportClientOptions.from_mapping({
        "ImportId": "imp12345678",
        "ApiKey": "1234567890123456",
        "ApiSecret": "secret",
        "BaseUrl": "https://api.iamport.kr",
    })
    print_config_summary(options)


def from_file():
    """
    config.json:
        {"AppSettings": {"Iamport": {"ImportId": "...", "ApiKey": "...", "ApiSecret": "..."}}}
    """
    print("\n=== From File ===")
    try:
        options = ConfigFileLoader.from_file("config.json", section="AppSettings:Iamport")
        print_config_summary(options)
    except FileNotFoundError as e:
        print(e)


async def with_logging_and_requests_transport():
    print("\n=== Logging + requests transport ===")
    options = load_from_env()
    logging_config = LoggingConfig.create(level="DEBUG", format="json")
    transport = RequestsTransport(TimeoutConfig(connect=3, read=10))

    async with IamportHttpClient(options, transport=transport, logging_config=logging_config) as client:
        token = await UsersApi(client).get_token(
            IamportTokenRequest(api_key=options.api_key, api_secret=options.api_secret)
        )
        print(f"Token expires at {token.expired_at}")


async def with_env():
    print("\n=== IamportHttpClient.from_env() ===")
    async with IamportHttpClient.from_env() as client:
        token = await client.authorize()
        print(f"Authorized, expires at {token.expired_at}")


if __name__ == "__main__":
    from_code()
    from_mapping()
    from_file()
    asyncio.run(with_logging_and_requests_transport())
    asyncio.run(with_env())
