"""Test configuration and fixtures for the book catalog."""

from tests.fixtures import *  # noqa: F401,F403
