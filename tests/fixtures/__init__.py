"""Shared pytest fixtures for data, service and API tests."""

from .api import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
