from .stats import SnapshotStatsService, get_snapshot_stats

__all__ = ["SnapshotStatsService", "get_snapshot_stats"]
