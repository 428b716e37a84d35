from pydantic import BaseModel, ConfigDict, Field


class PlanQuery(BaseModel):
    model_config = ConfigDict(extra="forbid")

    country: str = Field(..., min_length=2, max_length=2, pattern=r"^[A-Za-z0-9]+$")
