"""StrategyRecord data model."""

from typing import Optional, Union

from pydantic import BaseModel, Field

STATUS_ACTIVE = "active"
STATUS_TESTING = "testing"


class StrategyRecord(BaseModel):
    """Represents a trading strategy the journal links trades to."""

    id: Union[int, str] = Field(..., description="Strategy identifier")
    name: Optional[str] = Field(default=None, description="Display name")
    status: str = Field(default=STATUS_ACTIVE, description="active, testing or inactive")

    model_config = {"frozen": True}

    @property
    def is_active(self) -> bool:
        return self.status == STATUS_ACTIVE
