"""
Pydantic models for Amazon SNS HTTP/HTTPS delivery envelopes.

Reference: https://docs.aws.amazon.com/sns/latest/dg/sns-message-and-json-formats.html
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


MESSAGE_TYPE_HEADER = "x-amz-sns-message-type"


class MessageType(str, Enum):
    """Value of the envelope `Type` field (and of the message type header)."""

    NOTIFICATION = "Notification"
    SUBSCRIPTION_CONFIRMATION = "SubscriptionConfirmation"
    UNSUBSCRIBE_CONFIRMATION = "UnsubscribeConfirmation"


class NotificationEnvelope(BaseModel):
    """
    One SNS message as posted to a subscribed endpoint.

    `type` is kept as the raw string so that envelope types unknown to this
    service still parse and can be rejected by the resolvers with a precise error.
    """

    type: str = Field(alias="Type")
    message_id: Optional[str] = Field(None, alias="MessageId")
    topic_arn: Optional[str] = Field(None, alias="TopicArn")
    subject: Optional[str] = Field(None, alias="Subject")
    message: Optional[str] = Field(None, alias="Message")
    timestamp: Optional[str] = Field(None, alias="Timestamp")
    token: Optional[str] = Field(None, alias="Token")
    subscribe_url: Optional[str] = Field(None, alias="SubscribeURL")
    unsubscribe_url: Optional[str] = Field(None, alias="UnsubscribeURL")
    signature_version: Optional[str] = Field(None, alias="SignatureVersion")
    signature: Optional[str] = Field(None, alias="Signature")
    signing_cert_url: Optional[str] = Field(None, alias="SigningCertURL")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def is_type(self, message_type: MessageType) -> bool:
        return self.type == message_type.value
