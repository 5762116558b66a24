"""Common code for presentation exchange models."""
