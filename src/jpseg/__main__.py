"""Allow running jpseg as ``python -m jpseg``."""

from jpseg.cli import app

if __name__ == "__main__":
    app()
