"""Entry point for running verstamp as a module.

This allows running the application with:
    python -m verstamp [OPTIONS]
"""

from verstamp.cli import app

if __name__ == "__main__":
    app()
