"""Test configuration shared by every test module."""

import os

# Must run before any src.bookstore import loads config.yaml
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ["LOG_FILE"] = ""
os.environ["EMAIL_ENABLED"] = "false"

from tests.fixtures import *  # noqa: E402,F401,F403
