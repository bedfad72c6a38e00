"""
CLI Module for Academy Analytics

Runs dashboard queries against a snapshot file from the command line.

Usage:
    python -m cli.main --data snapshot.json admin
"""

from cli.main import build_parser, main

__all__ = ["build_parser", "main"]
