"""Configuration management for the RedCloud share CLI."""

import json
import os
import shutil
from pathlib import Path
from typing import Optional

from common.constants import DEFAULT_UI_ROOT, MAX_STATIC_SET_MEMBERS
from common.logging_config import get_logger

logger = get_logger(__name__)


class Config:
    """Manages CLI configuration stored in JSON file."""

    DEFAULT_CONFIG = {
        "server_url": os.environ.get("REDCLOUD_SERVER_URL", "http://localhost:3179"),
        "ui_root": DEFAULT_UI_ROOT,
        "max_static_set_members": MAX_STATIC_SET_MEMBERS,
        "timeout": 30,
        "max_retries": 3,
        "retry_backoff_multiplier": 2,
    }

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.redcloud/share.json)
        """
        self.config_path = config_path
        self.data = self._load()

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            import tempfile
            self.config_path = Path(tempfile.gettempdir()) / '.redcloud' / 'share.json'
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                config = self.DEFAULT_CONFIG.copy()
                config.update(data)
                return config
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Config file unreadable, using defaults: {e}")
                backup_path = self.config_path.with_suffix('.json.bak')
                try:
                    shutil.copy(self.config_path, backup_path)
                except IOError as copy_error:
                    logger.warning(f"Could not back up config file: {copy_error}")
                return self.DEFAULT_CONFIG.copy()
        else:
            config = self.DEFAULT_CONFIG.copy()
            try:
                with open(self.config_path, 'w') as f:
                    json.dump(config, f, indent=2)
            except IOError as e:
                logger.warning(f"Could not write default config: {e}")
            return config

    def save(self) -> None:
        """Save current configuration to file."""
        try:
            with open(self.config_path, 'w') as f:
                json.dump(self.data, f, indent=2)
        except IOError as e:
            logger.warning(f"Could not save config: {e}")

    def get_auth_token(self) -> Optional[str]:
        """
        Get the server auth token, from the REDCLOUD_AUTH_TOKEN env var or the file.

        Returns:
            Token string or None if not set
        """
        return os.environ.get('REDCLOUD_AUTH_TOKEN') or self.data.get('auth_token')

    def set_auth_token(self, token: str) -> None:
        """
        Set auth token and save to file.

        Args:
            token: Token accepted by the server's token auth
        """
        self.data['auth_token'] = token
        self.save()

    def get_server_url(self) -> str:
        """
        Get server base URL, without trailing slash.

        Returns:
            Base URL string (e.g., "http://localhost:3179")
        """
        return self.data.get('server_url', 'http://localhost:3179').rstrip('/')

    def get_ui_root(self) -> str:
        """
        Get the path the web UI is served under.

        Returns:
            UI root path (e.g., "/ui/")
        """
        return self.data.get('ui_root', DEFAULT_UI_ROOT)

    def get_ui_location(self) -> str:
        """
        Get the UI location that share URLs are made absolute against.

        Returns:
            The configured ui_location, or the server URL joined with the UI root
        """
        return self.data.get('ui_location') or self.get_server_url() + self.get_ui_root()

    def get_max_static_set_members(self) -> int:
        """
        Get the static-set size limit.

        Returns:
            Largest number of entries per static-set blob
        """
        return int(self.data.get('max_static_set_members', MAX_STATIC_SET_MEMBERS))

    def get_timeout(self) -> int:
        """
        Get request timeout in seconds.

        Returns:
            Timeout value in seconds
        """
        return self.data.get('timeout', 30)

    def get_retry_config(self) -> dict:
        """
        Get retry configuration.

        Returns:
            Dictionary with 'max_retries' and 'retry_backoff_multiplier'
        """
        return {
            'max_retries': self.data.get('max_retries', 3),
            'retry_backoff_multiplier': self.data.get('retry_backoff_multiplier', 2),
        }
