"""Package response schema returned by every /package endpoint."""

from pydantic import BaseModel, Field


class PackageResponse(BaseModel):
    id: int = Field(description="Generated package identifier")
    name: str = Field(description="Package name")
    price: int = Field(description="Whole-number price")

    model_config = {"from_attributes": True}
