"""Position schema."""

from typing import Annotated

from pydantic import BaseModel, Field


class Position(BaseModel):
    """A latitude/longitude pair in decimal degrees."""

    latitude: Annotated[float, Field(ge=-90.0, le=90.0)]
    longitude: Annotated[float, Field(ge=-180.0, le=180.0)]
