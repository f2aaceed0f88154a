"""CLI entry point for the course catalog."""

from .core import main as core_main


def main():
    """Run the course catalog CLI."""
    return core_main()


if __name__ == "__main__":
    raise SystemExit(main())
