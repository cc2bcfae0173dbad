"""Deployment error definitions."""

from __future__ import annotations


class DeploymentError(RuntimeError):
    """Raised when a single change cannot be deployed."""
