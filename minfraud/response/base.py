"""Base class for response objects."""

from pydantic import BaseModel, ConfigDict


class ResponseModel(BaseModel):
    # Fields the service adds later are ignored rather than rejected.
    model_config = ConfigDict(frozen=True, extra="ignore")

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)
