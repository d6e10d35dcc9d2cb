"""Job fair data repository and eligibility rules."""

__version__ = "0.1.0"
