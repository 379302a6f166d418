#!/usr/bin/env python3
"""
nsupdate-cloudflare - Main Entry Point

This is the main entry point for nsupdate-cloudflare.
It can be run directly or imported as a module.
"""

from nsupdate_cloudflare.cli.main import main

if __name__ == "__main__":
    main()
