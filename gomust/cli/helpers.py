"""CLI helper functions."""

import logging
import os

from dotenv import load_dotenv


def load_env_files():
    """Load .env from multiple locations (first found wins for each var)."""
    # Priority: cwd > ~/.config/gomust/.env > ~/.gomust.env
    load_dotenv()  # Current working directory

    config_dir = os.path.expanduser("~/.config/gomust/.env")
    if os.path.exists(config_dir):
        load_dotenv(config_dir)

    home_env = os.path.expanduser("~/.gomust.env")
    if os.path.exists(home_env):
        load_dotenv(home_env)


def configure_logging(verbose: bool = False):
    """Log to stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
