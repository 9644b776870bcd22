"""
Schemas package - Data Transfer Objects for derived results.

These DTOs are computed on demand and never persisted.
"""

from .dtos import (
    DailyRevenue,
    DashboardStats,
    EmployeePerformance,
    PeriodReport,
    ScheduleQuote,
    ServicePopularity,
    WindowStats,
)

__all__ = [
    "DailyRevenue",
    "DashboardStats",
    "EmployeePerformance",
    "PeriodReport",
    "ScheduleQuote",
    "ServicePopularity",
    "WindowStats",
]
