"""Main entry point for quizcraft CLI."""

from quizcraft.cli.app import app


def main():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
