from pydantic import BaseModel, ConfigDict


class Breadcrumb(BaseModel):
    """One segment of the current location, resolving to the prefix up to it."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
