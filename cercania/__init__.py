"""Cercanía: parties, their positions and the closeness test."""
