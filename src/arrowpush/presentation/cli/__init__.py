"""Command-line interface modules."""

from .push_electrons import main as push_electrons_main

__all__ = ["push_electrons_main"]
