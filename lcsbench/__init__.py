"""Longest common subsequence length by sequential and anti-diagonal dynamic programming."""

__version__ = "0.1.0"
__all__ = ["sequential", "antidiagonal"]