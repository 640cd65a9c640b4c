"""In-memory task list widget: add, live-filter and pin tasks."""

from .core.models import Task, TaskIdSource
from .core.tracker import RegionIds, TaskTracker, TrackerRegions

__all__ = ["Task", "TaskIdSource", "RegionIds", "TaskTracker", "TrackerRegions"]
