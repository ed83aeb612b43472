"""Aligo SMS Gateway Implementation.

Aligo (smartsms.aligo.in) is a Korean SMS provider with a form-encoded
REST API. Supported here:
- SMS and LMS (long message with optional subject)
- Reserved sends, either after a delay or at an absolute time

Reservation times are Korean wall clock regardless of host time zone.

API Documentation: https://smartsms.aligo.in/admin/api/spec.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any
from zoneinfo import ZoneInfo

import httpx

from aligo_sms.__about__ import __version__
from aligo_sms.core.exceptions import ConfigError
from aligo_sms.core.log import get_logger
from aligo_sms.sms.base import MessageType, SMSGateway, SMSMessage, SMSResult

log = get_logger(__name__)

DEFAULT_ENDPOINT_URL = "https://apis.aligo.in"
DEFAULT_USER_AGENT = f"SMS-Send-KR-Aligo/{__version__}"
DEFAULT_TIMEOUT = 3
DEFAULT_MESSAGE_TYPE = MessageType.SMS.value
DEFAULT_DELAY = 0

SEOUL = ZoneInfo("Asia/Seoul")

REASON_UNKNOWN = "unknown error"
REASON_INVALID_RESPONSE = "cannot get valid response for POST request"
REASON_EPOCH_INVALID = "_epoch is invalid"
REASON_DELAY_INVALID = "_delay is invalid"


@dataclass(frozen=True)
class AligoConfig:
    """Credentials and per-message defaults for the Aligo gateway.

    Raises:
        ConfigError: On the first missing or invalid value
    """

    account_id: str = ""
    api_key: str = field(default="", repr=False)
    default_sender: str = ""
    default_message_type: str = DEFAULT_MESSAGE_TYPE
    default_delay: int = DEFAULT_DELAY
    timeout: float = DEFAULT_TIMEOUT
    endpoint_url: str = DEFAULT_ENDPOINT_URL
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if not self.account_id:
            raise ConfigError("id required")
        if not self.api_key:
            raise ConfigError("api key required")
        if not self.default_sender:
            raise ConfigError("from required")
        if not MessageType.is_valid(self.default_message_type):
            raise ConfigError(
                "invalid type",
                details={"message_type": self.default_message_type},
            )
        if self.timeout is None or self.timeout <= 0:
            raise ConfigError("timeout must be positive", details={"timeout": self.timeout})
        if self.default_delay is None or self.default_delay < 0:
            raise ConfigError(
                "delay must not be negative",
                details={"delay": self.default_delay},
            )


def seoul_now() -> datetime:
    """Current time in Asia/Seoul."""
    return datetime.now(SEOUL)


def reservation_time(
    epoch: int | float | None = None,
    delay: int | None = None,
    now: datetime | None = None,
) -> datetime | None:
    """Compute when a reserved message should go out, in Asia/Seoul.

    A non-zero epoch wins over a delay. Without either (epoch 0 counts as
    absent, as does a non-positive delay) the message is sent immediately
    and None is returned.

    Args:
        epoch: Absolute Unix timestamp
        delay: Seconds from now
        now: Reference time, defaults to the current time

    Returns:
        Timezone-aware datetime in Asia/Seoul, or None
    """
    if epoch:
        return datetime.fromtimestamp(epoch, tz=SEOUL)
    if delay and delay > 0:
        base = now if now is not None else seoul_now()
        return base.astimezone(SEOUL) + timedelta(seconds=delay)
    return None


class AligoSMSGateway(SMSGateway):
    """Aligo SMS gateway implementation.

    One blocking POST per message. The configuration is immutable and
    the underlying ``httpx.Client`` may be shared across threads, so a
    single gateway can serve concurrent callers.

    Attributes:
        config: Validated driver configuration
    """

    name = "aligo"

    def __init__(self, config: AligoConfig):
        """Initialize Aligo SMS gateway.

        No network activity happens here.

        Args:
            config: Validated driver configuration
        """
        self.config = config
        self.send_url = f"{config.endpoint_url.rstrip('/')}/send/"
        self._client = httpx.Client(
            timeout=config.timeout,
            headers={"User-Agent": config.user_agent},
        )

    def build_form(
        self,
        message: SMSMessage,
        now: datetime | None = None,
    ) -> dict[str, str] | SMSResult:
        """Merge a message with the configured defaults into the request form.

        Returns:
            Form fields with empty values dropped, or a failed result when
            the message does not validate
        """
        config = self.config
        sender = message.sender or config.default_sender
        message_type = (
            message.message_type
            if message.message_type is not None
            else config.default_message_type
        )
        delay = message.delay if message.delay is not None else config.default_delay

        reason = self.check_message(message.text, message.to, message_type)
        if reason:
            return self.failure(reason)

        if isinstance(delay, bool) or not isinstance(delay, int) or delay < 0:
            return self.failure(REASON_DELAY_INVALID, {"delay": delay})

        msg_type = MessageType.parse(message_type)
        subject = message.subject if msg_type is MessageType.LMS else None

        form: dict[str, Any] = {
            "key": config.api_key,
            "user_id": config.account_id,
            "receiver": message.to,
            "sender": sender,
            "title": subject,
            "msg": message.text,
            "msg_type": msg_type.value,
        }

        try:
            send_at = reservation_time(message.epoch, delay, now)
        except (OverflowError, OSError, TypeError, ValueError):
            return self.failure(REASON_EPOCH_INVALID, {"epoch": message.epoch})
        if send_at is not None:
            form["rdate"] = send_at.strftime("%Y%m%d")
            form["rtime"] = send_at.strftime("%H%M")

        return {name: str(value) for name, value in form.items() if value}

    def send_sms(self, message: SMSMessage) -> SMSResult:
        """Send SMS via Aligo API.

        Args:
            message: SMS message to send

        Returns:
            Result with success flag; ``detail`` holds the vendor response
        """
        form = self.build_form(message)
        if isinstance(form, SMSResult):
            log.warning("Aligo SMS rejected before sending", reason=form.reason, to=message.to)
            return form

        try:
            response = self._client.post(self.send_url, data=form)

        except httpx.TimeoutException as e:
            log.error("Aligo SMS timeout", to=message.to, timeout=self.config.timeout)
            return self.failure(REASON_UNKNOWN, {"error": "Request timeout", "cause": str(e)})

        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.error("Aligo SMS HTTP error", error=str(e), to=message.to)
            return self.failure(REASON_UNKNOWN, {"error": str(e)})

        if not 200 <= response.status_code < 300:
            log.error(
                "Aligo SMS failed",
                status_code=response.status_code,
                to=message.to,
            )
            return self.failure(
                REASON_UNKNOWN,
                {
                    "status": response.status_code,
                    "reason": response.reason_phrase,
                    "content": response.text,
                },
            )

        return self.parse_response(response, message)

    def parse_response(self, response: httpx.Response, message: SMSMessage) -> SMSResult:
        """Classify a vendor response by its ``result_code``."""
        try:
            payload = response.json()
            result_code = int(payload["result_code"])
        except (ValueError, TypeError, KeyError):
            log.error("Aligo SMS invalid response", to=message.to, content=response.text)
            return self.failure(REASON_INVALID_RESPONSE, response.text)

        # negative codes are errors, zero and up are accepted
        if result_code < 0:
            reason = str(payload.get("message") or f"result_code {result_code}")
            log.error(
                "Aligo SMS rejected",
                result_code=result_code,
                error=reason,
                to=message.to,
            )
            return self.failure(reason, payload)

        log.info(
            "SMS sent via Aligo",
            to=message.to,
            result_code=result_code,
            msg_id=payload.get("msg_id"),
            msg_type=payload.get("msg_type"),
        )
        return SMSResult(success=True, reason="", detail=payload, provider=self.name)

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> AligoSMSGateway:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
