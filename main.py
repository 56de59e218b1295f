"""Main entry point for the tailspin configuration core."""
from __future__ import annotations

from dotenv import load_dotenv

from app.startup import run_application

# Load environment variables from .env early so logging settings can see them
load_dotenv()


def main() -> None:
    """Application entry point."""
    run_application()


__all__ = ["main"]

if __name__ == "__main__":
    main()
