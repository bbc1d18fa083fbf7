"""Dokumenty Please: a terminal border-checkpoint game of inspecting ID cards and passports."""

__version__ = "0.1.0"