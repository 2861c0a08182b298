"""Common base for operation inputs."""

from typing import Any, Dict, Optional, TypeVar, Union
from pydantic import BaseModel, ConfigDict, Field


InputT = TypeVar("InputT", bound="Input")


class Input(BaseModel):
    """Loosely typed input bag for one API operation.

    Every field may be absent at construction; required parameters are only
    checked when the request is serialized.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    region: Optional[str] = Field(None, alias="@region", description="Region override for this call")

    @classmethod
    def create(cls, input: Union[InputT, Dict[str, Any]]) -> InputT:
        """Return ``input`` unchanged if it is already an instance, otherwise build one."""
        return input if isinstance(input, cls) else cls.model_validate(input)

    def get_region(self) -> Optional[str]:
        return self.region

    def set_region(self, value: Optional[str]):
        self.region = value
        return self
