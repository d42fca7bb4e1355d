from __future__ import annotations

import os

from src.app.services.coordinate_service import CoordinateService
from src.domain.models import DEFAULT_GLOBE


def get_coordinate_service() -> CoordinateService:
    # Allow a deployment to default to another globe without changing code.
    globe = (os.getenv("COORDINATES_DEFAULT_GLOBE") or "").strip() or DEFAULT_GLOBE
    return CoordinateService(default_globe=globe)
