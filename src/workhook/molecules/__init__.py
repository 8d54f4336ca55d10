"""Molecule progress helpers."""

from workhook.molecules.progress import summarize_steps

__all__ = ["summarize_steps"]
