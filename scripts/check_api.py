#!/usr/bin/env python3
"""Script to smoke-check a backend with the API clients."""

import argparse
import asyncio
import getpass
import sys

from expert_chat.core.config import settings
from expert_chat.core.exceptions import ServiceError
from expert_chat.core.logging_setup import configure_logging
from expert_chat.factory import build_clients
from expert_chat.storage import InMemoryTokenStore


async def check_api(username: str, password: str, expert: bool) -> int:
    """Log in, read a few resources and log out again."""
    print(f"Connecting to {settings.api_base_url}")

    async with build_clients(token_store=InMemoryTokenStore()) as clients:
        try:
            user = await clients.auth.login(username, password)
        except ServiceError as e:
            print(f"Login failed: {e.message}")
            return 1

        print(f"Logged in as {user.get('username', username)}")

        try:
            current = await clients.auth.get_current_user()
            print(f"  - Current user id: {current.get('id') if current else None}")

            conversations = await clients.chat.get_conversations()
            print(f"  - Conversations: {len(conversations)}")

            if expert:
                queue = await clients.chat.get_expert_queue()
                print(f"  - Waiting: {len(queue.get('waitingConversations', []))}")
                print(f"  - Assigned: {len(queue.get('assignedConversations', []))}")
        except ServiceError as e:
            print(f"Request failed: {e.message}")
            return 1
        finally:
            await clients.auth.logout()
            print("Logged out")

    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Smoke-check the chat backend API")
    parser.add_argument("username", help="Account to log in with")
    parser.add_argument("--password", help="Password (prompted when omitted)")
    parser.add_argument("--expert", action="store_true", help="Also read the expert queue")
    args = parser.parse_args()

    configure_logging()
    password = args.password or getpass.getpass("Password: ")

    return asyncio.run(check_api(args.username, password, args.expert))


if __name__ == "__main__":
    sys.exit(main())
