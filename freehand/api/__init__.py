"""API layer for freehand strokes.

This module provides the service layer offering high-level interfaces
for drawing applications and JSON APIs.

The module exports one service class:
    StrokeService: Outline, path data and metrics for raw points, with
        per-device option overrides and optional clipping.

Example usage:
    Path data for a pen stroke::

        from freehand.api import StrokeService

        service = StrokeService()
        d = service.get_path([(0, 0, 0.2), (12, 3, 0.5)], device_type='pen')
"""

from .services import PEN_DEVICE, StrokeService

__all__ = ['StrokeService', 'PEN_DEVICE']
