"""Utilities for LAN simulation: rendering, accounting and visualization."""
