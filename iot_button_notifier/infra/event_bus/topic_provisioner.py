"""SNS topic provisioning."""
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from iot_button_notifier.domain.entities.topic import Topic
from iot_button_notifier.infra.common import get_logger, TopicCreationFailed
from iot_button_notifier.infra.event_bus.sns_client import create_sns_client

logger = get_logger(__name__)


class TopicProvisioner:
    """Get-or-create of a named SNS topic."""
    
    def __init__(self, sns_client: Any = None, region: Optional[str] = None):
        """
        Initialize topic provisioner.
        
        Args:
            sns_client: boto3 SNS client (created for region when None)
            region: AWS region
        """
        self.sns_client = sns_client or create_sns_client(region)
    
    def ensure_topic(self, name: str) -> Topic:
        """
        Resolve topic by name, creating it if absent.
        
        CreateTopic is idempotent by name in SNS, so repeated calls return
        the arn of the existing topic.
        
        Args:
            name: Topic name
            
        Returns:
            Topic with its arn
            
        Raises:
            TopicCreationFailed: If the SNS call fails
        """
        try:
            response = self.sns_client.create_topic(Name=name)
        except (ClientError, BotoCoreError) as e:
            raise TopicCreationFailed(f"Creating topic {name} failed: {e}") from e
        
        topic = Topic(name=name, arn=response["TopicArn"])
        logger.info("Resolved topic: %s", topic.arn)
        return topic
