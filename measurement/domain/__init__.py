"""Ladders, exact and approximate converters, and dimension tables."""
