"""Data fetching."""

from .fred_client import FredClient, RequestFn

__all__ = ["FredClient", "RequestFn"]
