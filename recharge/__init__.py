"""Top-level package for the recharge itinerary site tooling.

This package holds the data tables behind the itinerary page, the
client for the trip form backend, and the script that publishes the
static build to the hosting branch.
"""
