"""Configuration store for blog-tool."""

import logging
import os
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from .errors import ConfigDirError, ConfigReadError, ConfigWriteError
from .models import Configuration

logger = logging.getLogger(__name__)

APP_DIR = "blog-tool"
CONFIG_FILE = "config.json"
TOKEN_HINT = (
    "Github Personal Token (can be created at https://github.com/settings/tokens "
    "[make sure repo permissions are given])"
)


def user_config_dir() -> Path:
    """Return the OS-specific per-user configuration root."""
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        if not appdata:
            raise ConfigDirError("%APPDATA% is not defined")
        return Path(appdata)

    home = os.environ.get("HOME")
    if sys.platform == "darwin":
        if not home:
            raise ConfigDirError("$HOME is not defined")
        return Path(home) / "Library" / "Application Support"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        if not os.path.isabs(xdg):
            raise ConfigDirError("path in $XDG_CONFIG_HOME is relative")
        return Path(xdg)
    if not home:
        raise ConfigDirError("neither $XDG_CONFIG_HOME nor $HOME are defined")
    return Path(home) / ".config"


def default_config_path(config_dir: str | os.PathLike | None = None) -> Path:
    """
    Locate ``<config root>/blog-tool/config.json``.

    Args:
        config_dir: Explicit config root, bypassing OS detection

    Returns:
        Path to the config file. If the user config dir cannot be determined
        a warning is printed and the path is resolved against the working
        directory instead.
    """
    if config_dir:
        root = Path(config_dir)
    else:
        try:
            root = user_config_dir()
        except ConfigDirError as e:
            click.echo(f"Couldn't get user config path, {e}", err=True)
            root = Path()
    return root / APP_DIR / CONFIG_FILE


class ConfigStore:
    """Loads, creates and persists the user's configuration file."""

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
        logger.debug("Config store at %s", self.path)

    def read(self) -> Configuration:
        """Read and decode the config file without any recovery."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigReadError(f"couldn't read {self.path}: {e}") from e
        try:
            return Configuration.model_validate_json(raw)
        except ValidationError as e:
            raise ConfigReadError(str(e)) from e

    def load(self) -> Configuration:
        """
        Load the configuration, recreating it interactively when needed.

        A missing file, an undecodable file, or a file without an access
        token each lead to ``create_interactive``.
        """
        if not self.path.is_file():
            logger.info("No config file at %s", self.path)
            click.echo("Looks like this is your first time. Let's create a config file.")
            return self.create_interactive()

        try:
            config = self.read()
        except ConfigReadError as e:
            logger.info("Corrupt config file %s", self.path)
            click.echo(f"config file is corrupt, {e}\nLet's create a new one")
            return self.create_interactive()

        if not config.access_token:
            logger.info("Config file %s has no access token", self.path)
            click.echo("No access token found in config file. Let's create a new one")
            return self.create_interactive()

        logger.debug("Loaded config for %s/%s", config.username, config.repository)
        return config

    def create_interactive(self) -> Configuration:
        """Prompt for every field in order, then save."""
        username = click.prompt("Github username")
        repository = click.prompt("Repo name")
        click.echo(TOKEN_HINT)
        token = click.prompt("Token", hide_input=True)
        branch = click.prompt("Default branch to use")
        path = click.prompt("Default directory to use (For root use '/')")

        config = Configuration(
            repository=repository,
            access_token=token,
            username=username,
            default_branch=branch,
            default_path=path,
        )
        try:
            self.save(config)
        except ConfigWriteError as e:
            logger.info("Config not saved: %s", e)
            click.echo(str(e), err=True)
        return config

    def save(self, config: Configuration) -> None:
        """Write the configuration as indented JSON, creating its directory."""
        try:
            self.path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
            self.path.touch(mode=0o644, exist_ok=True)
            self.path.write_text(config.to_json() + "\n", encoding="utf-8")
        except OSError as e:
            raise ConfigWriteError(f"couldn't write config file, {e}") from e
        logger.info("Saved config to %s", self.path)

    def show(self) -> Configuration:
        """Print the current configuration as indented JSON."""
        config = self.load()
        click.echo(config.to_json())
        return config

    def reset(self, new: bool = False) -> Configuration | None:
        """
        Delete the config file.

        Args:
            new: Run interactive creation right after deleting

        Returns:
            The new configuration when ``new`` is set, otherwise None
        """
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise ConfigWriteError(f"couldn't delete config file, {e}") from e
        logger.info("Deleted config file %s", self.path)
        if new:
            return self.create_interactive()
        return None
