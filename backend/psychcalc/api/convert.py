"""
API route for single-property conversion.
"""

from fastapi import APIRouter, HTTPException

from psychcalc.models.conversion import ConversionInput, ConversionResult
from psychcalc.engine.converter import convert_annotated

router = APIRouter(prefix="/api/v1", tags=["convert"])


@router.post("/convert", response_model=ConversionResult)
async def convert_property(data: ConversionInput) -> ConversionResult:
    """
    Compute one psychrometric property from dry-bulb plus one known property.

    Range violations are reported in `warnings` unless `strict` is set, in
    which case they are rejected.
    """
    try:
        return convert_annotated(
            P=data.pressure,
            Tdb=data.Tdb,
            in_value=data.in_value,
            in_property=data.in_property,
            out_property=data.out_property,
            unit_system=data.unit_system,
            strict=data.strict,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
