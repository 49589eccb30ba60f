"""SNS message publisher."""
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from iot_button_notifier.infra.common import get_logger, PublishFailed
from iot_button_notifier.infra.event_bus.sns_client import create_sns_client

logger = get_logger(__name__)


class SNSPublisher:
    """SNS message publisher."""
    
    def __init__(self, sns_client: Any = None, region: Optional[str] = None):
        """
        Initialize SNS publisher.
        
        Args:
            sns_client: boto3 SNS client (created for region when None)
            region: AWS region
        """
        self.sns_client = sns_client or create_sns_client(region)
    
    def publish(self, topic_arn: str, subject: str, body: str) -> str:
        """
        Publish message to SNS topic.
        
        Args:
            topic_arn: SNS topic ARN
            subject: Message subject
            body: Plain-text message body
            
        Returns:
            Message ID
            
        Raises:
            PublishFailed: If the SNS call fails
        """
        try:
            response = self.sns_client.publish(
                TopicArn=topic_arn,
                Subject=subject,
                Message=body,
            )
        except (ClientError, BotoCoreError) as e:
            raise PublishFailed(f"Publishing to {topic_arn} failed: {e}") from e
        
        logger.info("Published message %s", response["MessageId"])
        return response["MessageId"]
