from fastapi import APIRouter

from playfair.core.exceptions import TextTooLongError
from playfair.dependencies import EngineDep, SettingsDep
from playfair.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse
from playfair.services.cipher import encrypt_with_square

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext with the Playfair cipher under the given keyword.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    engine: EngineDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a keyword.

    Repeated letters within a pair and a trailing single letter are
    padded with ``pad``, or the configured default pad when omitted.
    """
    if len(request.plaintext) > settings.max_text_length:
        raise TextTooLongError(len(request.plaintext), settings.max_text_length)

    pad = engine.pad if request.pad is None else request.pad
    square = engine.key_square(request.keyword)
    ciphertext = encrypt_with_square(square, request.plaintext, pad)

    return EncryptResponse(
        ciphertext=ciphertext,
        keyword=request.keyword,
        pad=pad,
        key_square=square.letters,
    )
