"""Interactive terminal chat against the RAID register API."""

from __future__ import annotations

import argparse
import asyncio
import sys

from raid_chat.application.conversation.services.response_formatter import MSG_GREETING
from raid_chat.domain import ChatSession, MessageRole
from raid_chat.infrastructure.integrations.raid_api import RAIDApiHttpClient
from raid_chat.infrastructure.parsing import RuleBasedIntentParser
from raid_chat.setup.config import get_settings
from raid_chat.setup.dependencies import build_handle_message_command
from raid_chat.setup.logging import setup_logging

EXIT_WORDS = {"exit", "quit", ":q"}


def parse_args() -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Chat with the RAID register assistant",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("project_key", help="Project the session is scoped to")
    parser.add_argument(
        "--api-base-url",
        default=settings.api_base_url,
        help="RAID register API base URL",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level",
    )
    return parser.parse_args()


def _print(role: MessageRole, content: str) -> None:
    prefix = {
        MessageRole.ASSISTANT: "assistant",
        MessageRole.ERROR: "error",
        MessageRole.SYSTEM: "system",
    }.get(role, role.value)
    print(f"[{prefix}] {content}\n")


async def run(project_key: str, api_base_url: str) -> int:
    settings = get_settings()
    client = RAIDApiHttpClient(
        base_url=api_base_url,
        api_key=settings.api_key,
        timeout=settings.request_timeout,
    )
    command = build_handle_message_command(client, RuleBasedIntentParser())
    session = ChatSession(project_key=project_key)
    _print(MessageRole.ASSISTANT, MSG_GREETING.format(project_key=project_key))

    try:
        while True:
            try:
                text = await asyncio.to_thread(input, "> ")
            except EOFError:
                break
            if text.strip().lower() in EXIT_WORDS:
                break

            for message in await command.execute(session, text):
                if message.role != MessageRole.USER:
                    _print(message.role, message.content)
    finally:
        await client.close()
    return 0


def main() -> None:
    args = parse_args()
    setup_logging(args.log_level)
    sys.exit(asyncio.run(run(args.project_key, args.api_base_url)))


if __name__ == "__main__":
    main()
