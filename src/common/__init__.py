"""Helpers shared by every pkgprobe component."""
