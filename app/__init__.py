"""Application entry point wiring: option parsing, logging and exit handling."""
