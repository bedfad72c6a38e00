"""Service layer for loading snapshots and building dashboards."""

from .data_loader import DatasetLoader
from .orchestrator import AdminDashboard, AnalyticsService

__all__ = [
    "DatasetLoader",
    "AdminDashboard",
    "AnalyticsService",
]
