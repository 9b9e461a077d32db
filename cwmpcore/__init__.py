"""Bounded containers, memory accounting, string helpers and socket wrappers for CWMP tools."""

__version__ = "0.1.0"