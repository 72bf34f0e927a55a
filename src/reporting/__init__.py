from src.reporting.breakdown import breakdown_frame, summary_metrics
from src.reporting.insights import driver_insight, top_driver_insights

__all__ = [
    "breakdown_frame",
    "driver_insight",
    "summary_metrics",
    "top_driver_insights",
]
