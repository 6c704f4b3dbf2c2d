"""ÖBB departures on a small display button."""

__version__ = "0.1.0"
