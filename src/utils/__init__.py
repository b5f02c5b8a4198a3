"""Shared utilities for srcgraph."""

from utils.env_utils import env_bool, env_text, env_value
from utils.registry_protocol import MutableRegistry

__all__ = ["MutableRegistry", "env_bool", "env_text", "env_value"]
