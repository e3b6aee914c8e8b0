"""Publish the static build to the hosting branch.

Usage: python deploy.py ["commit message"]
"""

from __future__ import annotations

from recharge.cli import deploy

if __name__ == "__main__":
    deploy()
