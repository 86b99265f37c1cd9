"""Analytics layer facade for the stock forecast engine."""

from .recommendations import Recommendation, build_recommendations
from .risk import detect_stockout_risks
from .tables import build_forecast_summary, forecast_points_frame

__all__ = [
    "Recommendation",
    "build_recommendations",
    "detect_stockout_risks",
    "build_forecast_summary",
    "forecast_points_frame",
]
