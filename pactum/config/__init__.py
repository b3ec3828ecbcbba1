"""Configuration module for pactum."""

from pactum.config.settings import PactumSettings, load_settings

__all__ = ["PactumSettings", "load_settings"]
