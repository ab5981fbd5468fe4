"""Career-Fit: career recommendation scoring engine."""

__version__ = "0.1.0"
