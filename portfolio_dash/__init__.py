"""Landlord portfolio dashboard: view-model derivation over properties and rent payments."""

__version__ = "0.1.0"
