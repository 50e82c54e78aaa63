#!/usr/bin/env python3
"""
GreenLake tenant API client
Main entry point for the CLI application
"""

from greenlake.cli import main

if __name__ == "__main__":
    main()
