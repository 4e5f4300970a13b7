"""Configuration module for identifier generation."""

from .settings import GeneratorSettings, get_settings


__all__ = [
    "GeneratorSettings",
    "get_settings",
]
