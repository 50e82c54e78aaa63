"""Fetch a token and the tenant's SCIM users using GREENLAKE_* settings."""

import asyncio

from greenlake import GreenLakeClient, GreenLakeError
from greenlake.config.settings import get_settings


async def main() -> None:
    settings = get_settings()

    try:
        client = GreenLakeClient.from_settings(settings)
    except ValueError as exc:
        print(f"GreenLake client not configured: {exc}")
        return

    try:
        if not settings.api_key:
            print("\n--- Token exchange ---")
            token = await asyncio.to_thread(client.get_token)
            print(f"{token.token_type} token, expires in {token.expires_in}s")
            client = GreenLakeClient.from_api_key(
                settings.host,
                settings.tenant_id,
                token.access_token,
                verify_tls=settings.verify_tls,
                timeout=settings.timeout,
            )

        print("\n--- Users ---")
        users = await asyncio.to_thread(client.get_users_as, "Users?startIndex=1&count=20")
        for user in users.resources:
            state = "active" if user.active else "inactive"
            print(f"{user.user_name:<40} {user.display_name:<30} {state}")
    except GreenLakeError as exc:
        print(f"Request failed: {exc}")


if __name__ == "__main__":
    asyncio.run(main())
