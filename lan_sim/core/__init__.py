"""Core components for LAN simulation.

This module contains the fundamental classes for the token ring
simulation, including Packet, Node and its kinds, report sinks and the
Network class.
"""
