#!/usr/bin/env python3
"""
License Guardian - Microsoft Entra ID license assignment helpers
Main entry point for the CLI application
"""
import sys

from license_guardian.cli import main

if __name__ == "__main__":
    sys.exit(main())
