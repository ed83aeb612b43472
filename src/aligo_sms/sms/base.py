"""Base SMS Gateway Interface.

Defines the message and result records shared by all gateways and the
abstract gateway interface. A gateway never raises for a failed send:
every failure comes back as an ``SMSResult`` with ``success=False``.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4

from aligo_sms.core.log import get_logger

log = get_logger(__name__)

# Failure reasons reported in SMSResult.reason
REASON_TEXT_MISSING = "text is needed"
REASON_TO_MISSING = "to is needed"
REASON_TYPE_INVALID = "_type is invalid"


class MessageType(str, Enum):
    """Message tier supported by the gateway."""

    SMS = "SMS"  # short message, ~80 chars
    LMS = "LMS"  # long message, ~2000 chars, optional subject

    @classmethod
    def parse(cls, value: str | None) -> MessageType:
        """Resolve a message type case-insensitively.

        Raises:
            ValueError: If the value is not SMS or LMS
        """
        if not isinstance(value, str):
            raise ValueError(f"message type must be a string: {value!r}")
        if not value:
            raise ValueError("message type is empty")
        try:
            return cls(value.upper())
        except ValueError:
            raise ValueError(f"unsupported message type: {value!r}") from None

    @classmethod
    def is_valid(cls, value: str | None) -> bool:
        try:
            cls.parse(value)
        except (ValueError, AttributeError):
            return False
        return True


@dataclass(frozen=True)
class SMSMessage:
    """SMS message to send.

    Fields left as None fall back to the gateway defaults.
    """

    to: str  # Recipient phone number
    text: str  # Message body
    sender: str | None = None  # Overrides the default sender
    message_type: str | None = None  # "SMS" or "LMS", any case
    delay: int | None = None  # Seconds from now to reserve the send
    subject: str | None = None  # LMS only
    epoch: int | float | None = None  # Absolute reservation time, wins over delay


@dataclass
class SMSResult:
    """Result of an SMS send operation."""

    success: bool
    reason: str = ""
    detail: Any = None
    provider: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "success": self.success,
            "reason": self.reason,
            "detail": self.detail,
            "provider": self.provider,
        }


class SMSGateway(ABC):
    """Abstract base class for SMS gateways.

    Implementations provide a blocking ``send_sms``. The async ``send``
    runs it in a worker thread.
    """

    name: str = ""

    @abstractmethod
    def send_sms(self, message: SMSMessage) -> SMSResult:
        """Send a single SMS message.

        Args:
            message: SMS message to send

        Returns:
            Result with success flag, failure reason and provider detail
        """

    async def send(self, message: SMSMessage) -> SMSResult:
        """Send a single SMS message without blocking the event loop."""
        return await asyncio.to_thread(self.send_sms, message)

    def check_message(self, text: str, to: str, message_type: str | None) -> str | None:
        """Validate a merged message before any network activity.

        Returns:
            Failure reason, or None when the message can be sent
        """
        if not text:
            return REASON_TEXT_MISSING
        if not to:
            return REASON_TO_MISSING
        if not MessageType.is_valid(message_type):
            return REASON_TYPE_INVALID
        return None

    def failure(self, reason: str, detail: Any = None) -> SMSResult:
        return SMSResult(success=False, reason=reason, detail=detail, provider=self.name)


class MockSMSGateway(SMSGateway):
    """Mock SMS gateway for development and testing."""

    name = "mock"

    def __init__(self, default_message_type: str = MessageType.SMS.value):
        self.default_message_type = default_message_type
        self._sent_messages: list[dict[str, Any]] = []

    def send_sms(self, message: SMSMessage) -> SMSResult:
        """Mock send - logs message and returns success."""
        message_type = (
            message.message_type
            if message.message_type is not None
            else self.default_message_type
        )
        reason = self.check_message(message.text, message.to, message_type)
        if reason:
            return self.failure(reason)

        msg_id = uuid4().hex
        msg_type = MessageType.parse(message_type).value

        log.info(
            "Mock SMS sent",
            msg_id=msg_id,
            to=message.to,
            msg_type=msg_type,
            text_length=len(message.text),
        )

        self._sent_messages.append({
            "msg_id": msg_id,
            "to": message.to,
            "text": message.text,
            "msg_type": msg_type,
            "sent_at": datetime.now(timezone.utc),
        })

        return SMSResult(
            success=True,
            detail={
                "result_code": 1,
                "message": "success",
                "msg_id": msg_id,
                "success_cnt": 1,
                "error_cnt": 0,
                "msg_type": msg_type,
            },
            provider=self.name,
        )

    def get_sent_messages(self) -> list[dict[str, Any]]:
        """Get list of all sent messages (for testing)."""
        return self._sent_messages.copy()

    def clear_sent_messages(self) -> None:
        """Clear sent messages list (for testing)."""
        self._sent_messages.clear()
