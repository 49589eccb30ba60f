"""Notification entities."""
from pydantic import BaseModel, ConfigDict


class NotificationMessage(BaseModel):
    """Subject and body sent for one button press."""
    model_config = ConfigDict(frozen=True)
    
    subject: str
    body: str


class DispatchResult(BaseModel):
    """Outcome of a successful invocation."""
    topic_arn: str
    subscription_arn: str
    message_id: str
