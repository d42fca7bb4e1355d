from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import get_coordinate_service
from src.adapters.api.schemas.coordinates import (
    FormatRequestSchema,
    FormatResponseSchema,
    GlobeCoordinateSchema,
    ParseErrorSchema,
    ParseRequestSchema,
)
from src.app.services.coordinate_service import CoordinateService
from src.domain.exceptions import CoordinateParseError

router = APIRouter(prefix="/coordinates", tags=["coordinates"])


@router.post(
    "/parse",
    response_model=GlobeCoordinateSchema,
    responses={422: {"model": ParseErrorSchema}},
)
def parse_coordinate(
    req: ParseRequestSchema,
    service: CoordinateService = Depends(get_coordinate_service),
) -> GlobeCoordinateSchema:
    try:
        value, grammar = service.parse(
            text=req.text, globe=req.globe, precision=req.precision
        )
    except CoordinateParseError:
        raise
    except ValueError as exc:
        # Parsed fine, but the point is off the globe.
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return GlobeCoordinateSchema(
        latitude=value.latitude,
        longitude=value.longitude,
        precision=value.precision,
        globe=value.globe,
        grammar=grammar.value,
    )


@router.post("/format", response_model=FormatResponseSchema)
def format_coordinate(
    req: FormatRequestSchema,
    service: CoordinateService = Depends(get_coordinate_service),
) -> FormatResponseSchema:
    text = service.format(
        latitude=req.latitude,
        longitude=req.longitude,
        precision=req.precision,
        globe=req.globe,
    )
    return FormatResponseSchema(text=text)
