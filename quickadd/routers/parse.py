from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import APIRouter, HTTPException

from ..nlp.parser import parse
from ..schemas import ParsedTaskOut, ParseIn

router = APIRouter()


def check_timezone(name: str | None) -> str | None:
    if name is None:
        return None
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise HTTPException(400, f"Unknown timezone: {name}")
    return name


@router.post("", response_model=ParsedTaskOut)
def parse_text(payload: ParseIn):
    """Preview what the parser pulls out of a line, chips included. Nothing is saved."""
    parsed = parse(payload.text, now=payload.now, tz=check_timezone(payload.timezone))
    return ParsedTaskOut.model_validate(parsed)
