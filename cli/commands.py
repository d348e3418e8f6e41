"""Command handler functions for CLI operations."""

import asyncio
from pathlib import Path
from typing import Optional

from common.logging_config import get_logger
from cli.config import Config
from cli.constants import GREEN, RESET
from cli.models import SetTokenCommand, ShareCommand
from cli.storage_client import HttpStorageClient
from share.ports import Signer, StorageClient
from share.sharer import Sharer

logger = get_logger(__name__)


_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get or create global Config instance.

    Returns:
        Config instance
    """
    global _config
    if _config is None:
        logger.debug("Loading share configuration")
        _config = Config(Path.home() / '.redcloud' / 'share.json')
    return _config


class ConsoleNotifier:
    """Collects the outcome of a share operation as printable text."""

    def __init__(self):
        self.messages: list[str] = []

    def show_shared_url(self, url: str, anchor_text: str) -> None:
        self.messages.append(f"Shared: {GREEN}{anchor_text}{RESET}\nURL: {url}")

    def show_error(self, message: str) -> None:
        self.messages.append(f"Error: {message}")


async def _run_share(
    cmd: ShareCommand,
    config: Config,
    storage: Optional[StorageClient],
    signer: Optional[Signer]
) -> str:
    notifier = ConsoleNotifier()
    owned_client = None
    if storage is None:
        owned_client = HttpStorageClient(config)
        storage = owned_client
    if signer is None:
        signer = storage

    try:
        sharer = Sharer(
            storage,
            signer,
            location=config.get_ui_location(),
            ui_root=config.get_ui_root(),
            selection_source=cmd.to_selection,
            max_static_set_members=config.get_max_static_set_members(),
        )
        await sharer.start(notifier)
    finally:
        if owned_client is not None:
            await owned_client.close()

    return "\n".join(notifier.messages)


def handle_share(
    cmd: ShareCommand,
    config: Optional[Config] = None,
    storage: Optional[StorageClient] = None,
    signer: Optional[Signer] = None
) -> str:
    """
    Handle 'share' command.

    Args:
        cmd: ShareCommand with the selected blobrefs
        config: Optional Config for dependency injection (testing)
        storage: Optional storage client for dependency injection (testing)
        signer: Optional signer; defaults to the storage client

    Returns:
        Share URL or error message
    """
    logger.info(f"Executing share command: {len(cmd.items)} item(s)")
    if config is None:
        config = get_config()
    result = asyncio.run(_run_share(cmd, config, storage, signer))
    logger.debug("Share command completed")
    return result


def handle_set_token(cmd: SetTokenCommand, config: Optional[Config] = None) -> str:
    """
    Handle 'set-token' command.

    Args:
        cmd: SetTokenCommand with the token
        config: Optional Config for dependency injection (testing)

    Returns:
        Confirmation message
    """
    if config is None:
        config = get_config()
    config.set_auth_token(cmd.token)
    return "Auth token saved to config."
