from pydantic import BaseModel, ConfigDict
from typing import Optional

class ShortenRequest(BaseModel):
    # Contents are checked by the client, not here, so both entry points
    # fail with the same InvalidArgumentError.
    model_config = ConfigDict(frozen=True)

    url: str
    alias: Optional[str] = None
