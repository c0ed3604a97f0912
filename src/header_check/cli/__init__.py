"""CLI helpers exposed for other modules."""

from .helpers import console, open_service, print_json, run_or_exit

__all__ = ["console", "open_service", "print_json", "run_or_exit"]
