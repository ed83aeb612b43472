"""SMS Gateway Factory.

Creates the appropriate SMS gateway based on configuration.

Supported providers:
- aligo: Aligo REST API (Korea)
- mock: For development and testing
"""

from __future__ import annotations

from aligo_sms.config import get_settings
from aligo_sms.core.exceptions import ConfigError
from aligo_sms.core.log import get_logger
from aligo_sms.sms.base import MockSMSGateway, SMSGateway

log = get_logger(__name__)


# Singleton instance
_sms_gateway: SMSGateway | None = None


def get_sms_gateway() -> SMSGateway:
    """Get the configured SMS gateway.

    The mock gateway is used only when SMS is disabled or the provider is
    "mock".

    Returns:
        SMS gateway instance based on config.

    Raises:
        ConfigError: If the provider is unknown or the Aligo configuration
            is missing a credential or is invalid
    """
    global _sms_gateway

    if _sms_gateway is not None:
        return _sms_gateway

    settings = get_settings()
    sms_config = settings.sms

    if not sms_config.enabled:
        log.info("SMS gateway disabled, using mock")
        _sms_gateway = MockSMSGateway()
        return _sms_gateway

    provider = sms_config.provider.lower()
    log.info("Initializing SMS gateway", provider=provider)

    if provider == "aligo":
        from aligo_sms.sms.aligo import AligoSMSGateway

        aligo_config = settings.aligo
        _sms_gateway = AligoSMSGateway(aligo_config.to_config())
        log.info(
            "Aligo SMS gateway initialized",
            user_id=aligo_config.user_id,
            sender=aligo_config.sender,
            msg_type=aligo_config.msg_type.upper(),
        )

    elif provider == "mock":
        _sms_gateway = MockSMSGateway()
        log.info("Mock SMS gateway initialized")

    else:
        raise ConfigError(
            f"unknown SMS provider '{provider}'",
            details={"provider": provider},
        )

    return _sms_gateway


def reset_sms_gateway() -> None:
    """Reset the SMS gateway (for testing)."""
    global _sms_gateway
    if _sms_gateway is not None and hasattr(_sms_gateway, "close"):
        _sms_gateway.close()
    _sms_gateway = None
