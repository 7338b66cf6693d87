"""Simulation of a circular-table restaurant driven by a command file."""

__version__ = "0.1.0"

__all__ = ["containers", "shellsort", "rituals", "restaurant", "simulate"]