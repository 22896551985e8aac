from fastapi import APIRouter, Query

from playfair.dependencies import EngineDep
from playfair.models.schemas import KeySquareResponse

router = APIRouter()


@router.get(
    "",
    response_model=KeySquareResponse,
    summary="Show key square",
    description="Build the 5x5 key square for a keyword.",
)
async def get_key_square(
    engine: EngineDep,
    keyword: str = Query(default="", max_length=1_000),
) -> KeySquareResponse:
    square = engine.key_square(keyword)
    return KeySquareResponse(
        keyword=keyword,
        letters=square.letters,
        rows=square.rows(),
    )
