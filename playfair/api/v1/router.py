from fastapi import APIRouter

from playfair.api.v1.endpoints import decrypt, encrypt, key_square

api_router = APIRouter()

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)

api_router.include_router(
    decrypt.router,
    prefix="/decrypt",
    tags=["Decryption"],
)

api_router.include_router(
    key_square.router,
    prefix="/key-square",
    tags=["Key Square"],
)
