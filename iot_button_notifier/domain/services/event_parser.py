"""Inbound event normalization."""
import json
from typing import Any

from pydantic import ValidationError

from iot_button_notifier.domain.entities.click_event import ClickEvent
from iot_button_notifier.infra.common.errors import InvalidClickEvent


def parse_click_event(event: Any) -> ClickEvent:
    """
    Build a ClickEvent from a Lambda payload.
    
    Args:
        event: Payload dict, or its JSON text
        
    Returns:
        ClickEvent
        
    Raises:
        InvalidClickEvent: If the payload is not an object or lacks fields
    """
    if isinstance(event, (str, bytes)):
        try:
            event = json.loads(event)
        except ValueError as e:
            raise InvalidClickEvent(f"Event is not valid JSON: {e}") from e
    
    if not isinstance(event, dict):
        raise InvalidClickEvent(f"Event must be an object, got {type(event).__name__}")
    
    try:
        return ClickEvent.model_validate(event)
    except ValidationError as e:
        raise InvalidClickEvent(f"Invalid click event: {e}") from e
