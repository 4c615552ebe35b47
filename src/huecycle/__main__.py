"""Main entry point for huecycle."""

from huecycle.cli import cli

if __name__ == "__main__":
    cli()
