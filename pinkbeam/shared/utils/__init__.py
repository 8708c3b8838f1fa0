"""Shared utilities: UTC datetime helpers."""

from pinkbeam.shared.utils.datetime import utc_now

__all__ = ["utc_now"]
