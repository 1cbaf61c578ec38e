"""Allow ``python -m sysclean``."""

from sysclean.cli.main import app

if __name__ == "__main__":
    app()
