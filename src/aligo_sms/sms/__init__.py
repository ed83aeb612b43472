"""SMS Gateway Integration Module.

Supported providers:
- aligo: Aligo REST API, SMS and LMS with reserved sends
- mock: For development and testing

A send never raises for ordinary failures; check ``SMSResult.success``
and read ``reason`` / ``detail``.
"""

from aligo_sms.sms.base import (
    MessageType,
    MockSMSGateway,
    SMSGateway,
    SMSMessage,
    SMSResult,
)


# Lazy imports for provider gateways and the factory
def __getattr__(name: str):
    """Lazy load provider-specific gateways and the factory."""
    if name in ("AligoConfig", "AligoSMSGateway"):
        from aligo_sms.sms import aligo
        return getattr(aligo, name)
    elif name in ("get_sms_gateway", "reset_sms_gateway"):
        from aligo_sms.sms import factory
        return getattr(factory, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Base classes
    "MessageType",
    "MockSMSGateway",
    "SMSGateway",
    "SMSMessage",
    "SMSResult",
    # Provider gateways (lazy loaded)
    "AligoConfig",
    "AligoSMSGateway",
    # Factory
    "get_sms_gateway",
    "reset_sms_gateway",
]
