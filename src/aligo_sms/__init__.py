"""Aligo SMS driver.

Sends SMS and LMS messages, optionally reserved for later, through the
Aligo REST API (https://apis.aligo.in).

Usage:
    from aligo_sms import AligoConfig, AligoSMSGateway, SMSMessage

    config = AligoConfig(account_id="keedi", api_key="...", default_sender="01025116893")
    with AligoSMSGateway(config) as gateway:
        result = gateway.send_sms(SMSMessage(to="01012345678", text="hello"))
        if not result.success:
            print(result.reason, result.detail)
"""

from aligo_sms.__about__ import __version__
from aligo_sms.core.exceptions import AligoSMSError, ConfigError
from aligo_sms.sms.aligo import AligoConfig, AligoSMSGateway
from aligo_sms.sms.base import MessageType, MockSMSGateway, SMSGateway, SMSMessage, SMSResult

__all__ = [
    "__version__",
    "AligoConfig",
    "AligoSMSError",
    "AligoSMSGateway",
    "ConfigError",
    "MessageType",
    "MockSMSGateway",
    "SMSGateway",
    "SMSMessage",
    "SMSResult",
]
