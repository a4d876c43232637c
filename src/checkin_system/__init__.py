"""Classroom check-in package.

Organized by feature modules (checkins, review, auth) with a thin Flask
controller layer over service/repository layers and a pluggable key-value
storage backend.
"""
from __future__ import annotations

from .main import create_app

__all__ = ["create_app"]
