from pydantic import BaseModel, ConfigDict


class Language(BaseModel):
    """A cataloged locale: opaque code plus its human-readable label."""

    model_config = ConfigDict(frozen=True)

    code: str
    label: str
