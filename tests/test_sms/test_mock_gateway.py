"""Tests for the mock SMS gateway and shared message types."""

from __future__ import annotations

from datetime import timedelta

import pytest

from aligo_sms.sms.base import MessageType, MockSMSGateway, SMSMessage


class TestMessageType:
    """Test message type parsing."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("SMS", MessageType.SMS),
            ("sms", MessageType.SMS),
            ("Lms", MessageType.LMS),
            (MessageType.LMS, MessageType.LMS),
        ],
    )
    def test_parse(self, value, expected):
        assert MessageType.parse(value) is expected

    @pytest.mark.parametrize("value", ["", None, "MMS", "XMS", " sms", 1, b"SMS"])
    def test_parse_invalid(self, value):
        with pytest.raises(ValueError):
            MessageType.parse(value)

        assert MessageType.is_valid(value) is False


class TestMockSMSGateway:
    """Test mock SMS gateway."""

    def test_send_records_message(self):
        gateway = MockSMSGateway()

        result = gateway.send_sms(SMSMessage(to="01012345678", text="hi", message_type="lms"))

        assert result.success is True
        assert result.reason == ""
        assert result.provider == "mock"
        assert result.detail["result_code"] == 1
        assert result.detail["msg_type"] == "LMS"

        sent = gateway.get_sent_messages()
        assert len(sent) == 1
        assert sent[0]["to"] == "01012345678"
        assert sent[0]["msg_id"] == result.detail["msg_id"]
        assert sent[0]["sent_at"].tzinfo is not None
        assert sent[0]["sent_at"].utcoffset() == timedelta(0)

    def test_send_validates_like_real_gateway(self):
        gateway = MockSMSGateway()

        assert gateway.send_sms(SMSMessage(to="01012345678", text="")).reason == "text is needed"
        assert gateway.send_sms(SMSMessage(to="", text="hi")).reason == "to is needed"
        assert (
            gateway.send_sms(SMSMessage(to="010", text="hi", message_type="XMS")).reason
            == "_type is invalid"
        )
        assert (
            gateway.send_sms(SMSMessage(to="010", text="hi", message_type=1)).reason
            == "_type is invalid"
        )
        assert gateway.get_sent_messages() == []

    def test_clear_sent_messages(self):
        gateway = MockSMSGateway()
        gateway.send_sms(SMSMessage(to="01012345678", text="hi"))

        gateway.clear_sent_messages()

        assert gateway.get_sent_messages() == []

    @pytest.mark.asyncio
    async def test_async_send(self):
        gateway = MockSMSGateway()

        result = await gateway.send(SMSMessage(to="01012345678", text="hi"))

        assert result.success is True
        assert len(gateway.get_sent_messages()) == 1
