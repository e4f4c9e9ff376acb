"""Shared types used across grid systems and analysis."""

from .types import Face, GeoPoint, UnitVector3, FaceUV, FaceST, GridCell

__all__ = ['Face', 'GeoPoint', 'UnitVector3', 'FaceUV', 'FaceST', 'GridCell']
