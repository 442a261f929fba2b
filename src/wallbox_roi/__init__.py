"""Wallbox ROI estimator — home vs. public charging cost projection."""

__version__ = "1.0.0"
