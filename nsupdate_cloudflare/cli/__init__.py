"""
Command-line interface components.

This package contains the CLI entry point for nsupdate-cloudflare.
"""

from .main import main

__all__ = ["main"]
