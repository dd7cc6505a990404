"""
Tests for sending, forwarding and batch sending

Tests cover:
- Address and default precedence
- Body selection
- Forwarding received emails
- Batch file validation
"""
import json
from io import StringIO

import pytest

from rusend.core.models import EmailMessage
from rusend.features.send import SendOptions, SendWorkflow, load_batch_file, send_email
from rusend.utils.config_manager import AppConfig
from rusend.utils.errors import (
    FileSystemError,
    InvalidBatchFileError,
    MissingRequiredFieldError,
    ResendAPIError,
)


def make_workflow(client, config=None, output=None, stdin=None):
    console = output[0] if output else None
    return SendWorkflow(client, config or AppConfig(api_key="re_x"), console, console, stdin)


class TestAddressPrecedence:
    """Tests for flag vs configured defaults"""

    @pytest.mark.asyncio
    async def test_flag_from_with_default_to(self, fake_client, output):
        """Flags win per field; missing flags fall back to defaults"""
        config = AppConfig(api_key="re_x", default_from="D_F", default_to="D_T")
        workflow = make_workflow(fake_client, config, output)

        message = await workflow.build_message(
            SendOptions(sender="C_F", subject="Hi", text="body")
        )

        assert message.sender == "C_F"
        assert message.to == ["D_T"]

    @pytest.mark.asyncio
    async def test_defaults_used_when_no_flags(self, fake_client, app_config, output):
        workflow = make_workflow(fake_client, app_config, output)

        message = await workflow.build_message(SendOptions(subject="Hi", text="body"))

        assert message.sender == "Defaults <default@example.com>"
        assert message.to == ["inbox@example.com"]

    @pytest.mark.asyncio
    async def test_to_flag_is_split(self, fake_client, output):
        workflow = make_workflow(fake_client, output=output)

        message = await workflow.build_message(SendOptions(
            sender="a@x.com", to="a@x.com, b@y.com ,,c@z.com", subject="Hi"
        ))

        assert message.to == ["a@x.com", "b@y.com", "c@z.com"]

    @pytest.mark.asyncio
    async def test_missing_sender_fails(self, fake_client, output):
        workflow = make_workflow(fake_client, output=output)

        with pytest.raises(MissingRequiredFieldError, match="No sender"):
            await workflow.build_message(SendOptions(to="a@x.com", subject="Hi"))

    @pytest.mark.asyncio
    async def test_missing_recipients_fails(self, fake_client, output):
        workflow = make_workflow(fake_client, output=output)

        with pytest.raises(MissingRequiredFieldError, match="No recipients"):
            await workflow.build_message(SendOptions(sender="a@x.com", to=" , ", subject="Hi"))

    @pytest.mark.asyncio
    async def test_missing_subject_fails(self, fake_client, app_config, output):
        workflow = make_workflow(fake_client, app_config, output)

        with pytest.raises(MissingRequiredFieldError, match="Subject"):
            await workflow.build_message(SendOptions(text="body"))

    @pytest.mark.asyncio
    async def test_cc_bcc_reply_to_are_split(self, fake_client, app_config, output):
        workflow = make_workflow(fake_client, app_config, output)

        message = await workflow.build_message(SendOptions(
            subject="Hi", cc="a@x.com,b@x.com", bcc="c@x.com", reply_to="d@x.com"
        ))

        assert message.cc == ["a@x.com", "b@x.com"]
        assert message.bcc == ["c@x.com"]
        assert message.reply_to == ["d@x.com"]


class TestBodySelection:
    """Tests for body source priority"""

    @pytest.mark.asyncio
    async def test_stdin_body_wins(self, fake_client, app_config, output):
        workflow = make_workflow(fake_client, app_config, output, stdin=StringIO("<b>piped</b>"))

        message = await workflow.build_message(SendOptions(
            subject="Hi", from_stdin=True, html="<i>ignored</i>", text="ignored"
        ))

        assert message.html == "<b>piped</b>"
        assert message.text is None

    @pytest.mark.asyncio
    async def test_html_before_text(self, fake_client, app_config, output):
        workflow = make_workflow(fake_client, app_config, output)

        message = await workflow.build_message(SendOptions(
            subject="Hi", html="<p>hi</p>", text="hi"
        ))

        assert message.html == "<p>hi</p>"
        assert message.text is None

    @pytest.mark.asyncio
    async def test_text_only(self, fake_client, app_config, output):
        workflow = make_workflow(fake_client, app_config, output)

        message = await workflow.build_message(SendOptions(subject="Hi", text="plain"))

        assert message.text == "plain"
        assert message.html is None


class TestForwarding:
    """Tests for forwarding a received email"""

    @pytest.mark.asyncio
    async def test_forward_default_subject(self, fake_client, app_config, output):
        workflow = make_workflow(fake_client, app_config, output)

        message = await workflow.build_message(SendOptions(forward_id="E1"))

        fake_client.get_received_email.assert_awaited_once_with("E1")
        assert message.subject == "Fwd: Hello"
        assert message.html == "<p>Original body</p>"
        assert message.text == "Original body"

    @pytest.mark.asyncio
    async def test_forward_subject_override(self, fake_client, app_config, output):
        workflow = make_workflow(fake_client, app_config, output)

        message = await workflow.build_message(SendOptions(forward_id="E1", subject="See below"))

        assert message.subject == "See below"

    @pytest.mark.asyncio
    async def test_forward_fetch_failure_has_context(self, fake_client, app_config, output):
        fake_client.get_received_email.side_effect = ResendAPIError("Email not found")
        workflow = make_workflow(fake_client, app_config, output)

        with pytest.raises(ResendAPIError, match="fetch received email E1: Email not found"):
            await workflow.build_message(SendOptions(forward_id="E1"))

        fake_client.send_email.assert_not_awaited()


class TestSend:
    """Tests for submitting one email"""

    @pytest.mark.asyncio
    async def test_send_submits_message_and_prints_id(self, fake_client, app_config, output):
        console, buffer = output

        result = await send_email(
            app_config, fake_client, SendOptions(subject="Hi", text="body"),
            console=console, error_console=console,
        )

        assert result is True
        sent = fake_client.send_email.await_args.args[0]
        assert isinstance(sent, EmailMessage)
        assert sent.to_payload() == {
            "from": "Defaults <default@example.com>",
            "to": ["inbox@example.com"],
            "subject": "Hi",
            "text": "body",
        }
        assert "em_new" in buffer.getvalue()

    @pytest.mark.asyncio
    async def test_send_failure_has_context(self, fake_client, app_config, output):
        fake_client.send_email.side_effect = ResendAPIError("Invalid from")
        workflow = make_workflow(fake_client, app_config, output)

        with pytest.raises(ResendAPIError, match="send failed: Invalid from"):
            await workflow.send(SendOptions(subject="Hi"))


def write_batch(tmp_path, records):
    path = tmp_path / "batch.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


class TestBatch:
    """Tests for batch files"""

    def test_load_valid_batch(self, tmp_path):
        path = write_batch(tmp_path, [
            {"from": "a@x.com", "to": ["b@y.com"], "subject": "One", "html": "<p>1</p>"},
            {"from": "a@x.com", "to": ["c@y.com", "d@y.com"], "subject": "Two", "text": "2"},
        ])

        messages = load_batch_file(path)

        assert [m.subject for m in messages] == ["One", "Two"]
        assert messages[1].to == ["c@y.com", "d@y.com"]
        assert messages[0].to_payload()["from"] == "a@x.com"

    @pytest.mark.asyncio
    async def test_invalid_element_fails_before_network(self, fake_client, tmp_path, output):
        path = write_batch(tmp_path, [
            {"from": "a@x.com", "to": ["b@y.com"], "subject": "One"},
            {"from": "a@x.com", "to": ["b@y.com"]},
            {"from": "a@x.com", "to": ["b@y.com"], "subject": "Three"},
        ])
        workflow = make_workflow(fake_client, output=output)

        with pytest.raises(InvalidBatchFileError, match="message 2 of 3") as exc_info:
            await workflow.send_batch(path)

        assert "subject" in exc_info.value.message
        fake_client.send_batch.assert_not_awaited()

    def test_to_must_be_list(self, tmp_path):
        path = write_batch(tmp_path, [{"from": "a@x.com", "to": "b@y.com", "subject": "One"}])

        with pytest.raises(InvalidBatchFileError):
            load_batch_file(path)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "batch.json"
        path.write_text('[{"from": ', encoding="utf-8")

        with pytest.raises(InvalidBatchFileError, match="parse json"):
            load_batch_file(path)

    def test_not_an_array(self, tmp_path):
        path = write_batch(tmp_path, {"from": "a@x.com"})

        with pytest.raises(InvalidBatchFileError, match="expected an array"):
            load_batch_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileSystemError, match="read batch file"):
            load_batch_file(tmp_path / "nope.json")

    @pytest.mark.asyncio
    async def test_empty_batch_rejected(self, fake_client, tmp_path, output):
        path = write_batch(tmp_path, [])
        workflow = make_workflow(fake_client, output=output)

        with pytest.raises(InvalidBatchFileError, match="no messages"):
            await workflow.send_batch(path)

        fake_client.send_batch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_batch_submitted_as_one_request(self, fake_client, tmp_path, output):
        console, buffer = output
        path = write_batch(tmp_path, [
            {"from": "a@x.com", "to": ["b@y.com"], "subject": "One"},
            {"from": "a@x.com", "to": ["c@y.com"], "subject": "Two"},
        ])
        workflow = make_workflow(fake_client, output=output)

        await workflow.send_batch(path)

        fake_client.send_batch.assert_awaited_once()
        submitted = fake_client.send_batch.await_args.args[0]
        assert len(submitted) == 2
        assert "em_b1" in buffer.getvalue()
        assert "em_b2" in buffer.getvalue()
