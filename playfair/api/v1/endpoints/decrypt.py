from fastapi import APIRouter

from playfair.core.exceptions import TextTooLongError
from playfair.dependencies import EngineDep, SettingsDep
from playfair.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or odd-length ciphertext"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt Playfair ciphertext with a known keyword.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    engine: EngineDep,
) -> DecryptResponse:
    """Decrypt ciphertext with a known keyword."""
    if len(request.ciphertext) > settings.max_text_length:
        raise TextTooLongError(len(request.ciphertext), settings.max_text_length)

    result = engine.decrypt_with_key(request.ciphertext, request.keyword)

    return DecryptResponse(
        plaintext=result.plaintext,
        keyword=result.key,
        key_square=result.key_square.letters,
        explanation=result.explanation,
    )
