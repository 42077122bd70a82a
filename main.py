"""
postcorpus - Entry point.

Usage:
    python main.py                      # Run CLI help
    python main.py check                # Validate the corpus
    python main.py -c _posts list       # List posts
    python main.py export site.json     # Write a manifest for the renderer
"""

from postcorpus.cli.main import app


def main():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
