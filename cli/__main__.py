#!/usr/bin/env python3
"""Main CLI entry point for india-crop-summary

This allows running CLI commands via:
    python -m cli summarize_crops --help
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


def main():
    """Main CLI dispatcher"""
    if len(sys.argv) < 2:
        print("Usage: python -m cli <command> [args...]")
        print("\nAvailable commands:")
        print(
            "  summarize_crops      Build per-year production extremes and per-crop averages"
        )
        print("\nFor help on a specific command:")
        print("  python -m cli <command> --help")
        sys.exit(1)

    command = sys.argv[1]
    # Remove the command from sys.argv so the subcommand can parse its own args
    sys.argv = [sys.argv[0]] + sys.argv[2:]

    if command == "summarize_crops":
        from cli.summarize_crops import main as summarize_main

        sys.exit(summarize_main())
    else:
        print(f"Unknown command: {command}")
        print("Available commands: summarize_crops")
        sys.exit(1)


if __name__ == "__main__":
    main()
