"""Core parsing package."""

from __future__ import annotations
