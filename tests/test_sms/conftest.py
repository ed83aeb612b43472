"""Test fixtures for SMS gateway tests."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest


def _make_response(status_code: int = 200, payload=None, text: str | None = None):
    """Build a mocked httpx response."""
    response = MagicMock()
    response.status_code = status_code
    response.reason_phrase = "OK" if status_code == 200 else "Internal Server Error"
    if payload is None:
        response.json.side_effect = ValueError("Expecting value")
        response.text = text if text is not None else ""
    else:
        response.json.return_value = payload
        response.text = text if text is not None else json.dumps(payload)
    return response


@pytest.fixture
def mock_aligo_client():
    """Mock Aligo HTTP client."""
    with patch("httpx.Client") as mock:
        client = MagicMock()

        # Mock successful send response
        client.post.return_value = _make_response(
            payload={
                "result_code": "1",
                "message": "success",
                "msg_id": "123456789",
                "success_cnt": 1,
                "error_cnt": 0,
                "msg_type": "SMS",
            }
        )

        mock.return_value = client
        yield client


@pytest.fixture
def aligo_config():
    """Valid Aligo driver configuration."""
    from aligo_sms.sms.aligo import AligoConfig

    return AligoConfig(
        account_id="keedi",
        api_key="test_api_key",
        default_sender="01025116893",
    )


@pytest.fixture
def aligo_gateway(mock_aligo_client, aligo_config):
    """Create AligoSMSGateway with mocked client."""
    from aligo_sms.sms.aligo import AligoSMSGateway

    gateway = AligoSMSGateway(aligo_config)
    gateway._client = mock_aligo_client
    return gateway


@pytest.fixture
def sample_sms_message():
    """Create a sample SMS message."""
    from aligo_sms.sms.base import SMSMessage

    return SMSMessage(
        to="01012345678",
        text="예약 확인: 1월 15일 10시 예약이 확정되었습니다.",
    )


@pytest.fixture
def aligo_response():
    """Factory for mocked Aligo HTTP responses."""
    return _make_response
