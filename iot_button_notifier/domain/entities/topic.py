"""Topic and subscription entities."""
from pydantic import BaseModel, ConfigDict

# ListSubscriptionsByTopic reports "PendingConfirmation", Subscribe returns
# "pending confirmation".
PENDING_CONFIRMATION_ARNS = frozenset({"PendingConfirmation", "pending confirmation"})


class Topic(BaseModel):
    """SNS topic resolved by name."""
    model_config = ConfigDict(frozen=True)
    
    name: str
    arn: str


class Subscription(BaseModel):
    """Binding of one endpoint and protocol to a topic."""
    model_config = ConfigDict(frozen=True)
    
    topic_arn: str
    protocol: str
    endpoint: str
    subscription_arn: str
    
    @property
    def pending_confirmation(self) -> bool:
        """True until the recipient confirms out-of-band."""
        return self.subscription_arn in PENDING_CONFIRMATION_ARNS
