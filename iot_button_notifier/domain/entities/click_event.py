"""Click event entity."""
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClickType(str, Enum):
    """Click types reported by the button."""
    SINGLE = "SINGLE"
    DOUBLE = "DOUBLE"
    LONG = "LONG"
    """Sent when the first press lasts longer than 1.5 seconds."""


class ClickEvent(BaseModel):
    """
    Payload sent by the button on each press.
    
    click_type is kept as the raw value (stringified, or None when absent)
    so that values outside ClickType still reach the message composer.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    
    serial_number: str = Field(alias="serialNumber")
    battery_voltage: str = Field(alias="batteryVoltage")
    click_type: Optional[str] = Field(default=None, alias="clickType")
    
    @field_validator("click_type", mode="before")
    @classmethod
    def _stringify_click_type(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)
