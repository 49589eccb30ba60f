"""Application configuration entity."""
from pydantic import BaseModel, Field


class AppConfig(BaseModel):
    """Application configuration for runtime environment."""
    recipient_email: str
    """Endpoint subscribed to the topic; fixed per deployment."""
    topic_name: str = "aws-iot-button-sns-topic"
    subscription_protocol: str = "email"
    aws_region: str | None = None
    max_subscription_pages: int = Field(default=100, ge=1)
    """Upper bound on ListSubscriptionsByTopic pages read per lookup."""
