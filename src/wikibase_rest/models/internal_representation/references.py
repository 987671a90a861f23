from pydantic import BaseModel, ConfigDict

from .snaks import Snak

ReferencePart = Snak


class Reference(BaseModel):
    hash: str = ""
    parts: list[ReferencePart]

    model_config = ConfigDict(frozen=True)
