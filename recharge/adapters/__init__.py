"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Processes (subprocess)
- Version control (git CLI)
- The form backend (HTTP via requests)
- The itinerary data tables
"""
