"""Report assembly and sample data."""

from .dashboard import DashboardBuilder, DashboardReport
from .generator import TaskGenerator

__all__ = ['DashboardBuilder', 'DashboardReport', 'TaskGenerator']
