from typing import Annotated

from fastapi import Depends

from playfair.core.config import Settings, get_settings
from playfair.services.cipher import PlayfairEngine


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Engine dependency, padded with the configured letter
def get_engine(settings: SettingsDep) -> PlayfairEngine:
    """Get a Playfair engine using the configured pad letter."""
    return PlayfairEngine(pad=settings.default_pad_letter)

EngineDep = Annotated[PlayfairEngine, Depends(get_engine)]
