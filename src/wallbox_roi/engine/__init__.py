"""Engine — deterministic ROI projection."""

from wallbox_roi.engine.roi import calculate_roi

__all__ = [
    "calculate_roi",
]
