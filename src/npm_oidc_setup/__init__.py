"""Publish a placeholder npm package so OIDC trusted publishing can be configured."""

__version__ = "1.0.0"
