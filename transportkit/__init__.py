"""Multiplicity analysis, track conversion, dose bookkeeping and primary generation for transport simulations."""

__version__ = "0.1.0"
__all__ = ["dose", "moments", "multiplicity", "primaries", "tracks"]