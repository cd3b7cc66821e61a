"""Unit tests for TelegramClient."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from infrastructure.configuration import TelegramSettings
from infrastructure.telegram.buttons import TelegramButton
from infrastructure.telegram.client import (
    TelegramApiResult,
    TelegramClient,
    is_local_file_path,
)

pytestmark = pytest.mark.unit

API_URL = "https://api.telegram.org/bot123456:test-token/{}"


def posted_json(session):
    return session.post.call_args.kwargs["json"]


class TestConfiguration:
    """Tests for TelegramClient configuration checks."""

    def test_configured(self, telegram_client):
        assert telegram_client.is_configured() is True

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"bot_token": ""},
            {"enabled": False},
            {"session": None},
        ],
    )
    def test_not_configured(self, mock_session, kwargs):
        params = {"bot_token": "123456:test-token", "session": mock_session, "enabled": True}
        params.update(kwargs)
        client = TelegramClient(logger=MagicMock(), **params)

        result = client.send_message("10", "hi")

        assert client.is_configured() is False
        assert result == TelegramApiResult(ok=False, error="Telegram is not configured")
        mock_session.post.assert_not_called()

    def test_chat_ids_are_strings(self, telegram_client):
        assert telegram_client.chat_ids == ["10", "11"]

    def test_from_settings(self, mock_session):
        settings = TelegramSettings(
            TELEGRAM_ENABLED=True,
            TELEGRAM_BOT_TOKEN="123456:test-token",
            TELEGRAM_CHAT_IDS="10, 11",
            TELEGRAM_DISABLE_PREVIEW=True,
            TELEGRAM_TIMEOUT=3,
        )

        client = TelegramClient.from_settings(settings, mock_session)

        assert client.is_configured()
        assert client.chat_ids == ["10", "11"]
        assert client.disable_preview is True
        assert client.timeout == 3

    def test_close_closes_session(self, telegram_client, mock_session):
        telegram_client.close()

        mock_session.close.assert_called_once()


class TestSendMessage:
    """Tests for TelegramClient.send_message."""

    def test_success(self, telegram_client, mock_session, api_response):
        mock_session.post.return_value = api_response(
            {"ok": True, "result": {"message_id": 77, "chat": {"id": 10}}}
        )

        result = telegram_client.send_message("10", "*Hello*")

        assert result.ok is True
        assert result.message_id == 77
        assert result.result["chat"] == {"id": 10}
        mock_session.post.assert_called_once_with(
            API_URL.format("sendMessage"),
            json={
                "chat_id": "10",
                "text": "*Hello*",
                "parse_mode": "Markdown",
                "disable_web_page_preview": False,
            },
            timeout=5,
        )

    def test_with_buttons(self, telegram_client, mock_session):
        telegram_client.send_message(
            "10",
            "Pick one",
            buttons=[TelegramButton.callback("Yes", "y"), TelegramButton.callback("No", "n")],
            button_layout=[[0], [1]],
        )

        markup = json.loads(posted_json(mock_session)["reply_markup"])
        assert markup == {
            "inline_keyboard": [
                [{"text": "Yes", "callback_data": "y"}],
                [{"text": "No", "callback_data": "n"}],
            ]
        }

    def test_api_error_description(self, telegram_client, mock_session, api_response):
        mock_session.post.return_value = api_response(
            {"ok": False, "description": "Bad Request: chat not found"}, 400
        )

        result = telegram_client.send_message("10", "hi")

        assert result == TelegramApiResult(ok=False, error="Bad Request: chat not found")

    def test_api_error_without_description(
        self, telegram_client, mock_session, api_response
    ):
        mock_session.post.return_value = api_response({"ok": False}, 500)

        result = telegram_client.send_message("10", "hi")

        assert result.error == "Unknown Telegram API error"

    def test_ok_false_with_http_200(self, telegram_client, mock_session, api_response):
        mock_session.post.return_value = api_response({"ok": False}, 200)

        assert telegram_client.send_message("10", "hi").ok is False

    def test_network_error(self, telegram_client, mock_session):
        mock_session.post.side_effect = requests.ConnectionError("connection reset")

        result = telegram_client.send_message("10", "hi")

        assert result.ok is False
        assert result.error == "connection reset"

    def test_invalid_json(self, telegram_client, mock_session, api_response):
        response = api_response()
        response.json.side_effect = ValueError("Expecting value")
        mock_session.post.return_value = response

        result = telegram_client.send_message("10", "hi")

        assert result.ok is False
        assert result.error == "Expecting value"


class TestSendPhoto:
    """Tests for TelegramClient.send_photo."""

    def test_remote_photo_sent_as_json(self, telegram_client, mock_session):
        telegram_client.send_photo(
            "10", "https://example.com/cat.jpg", caption="x" * 2000
        )

        payload = posted_json(mock_session)
        assert mock_session.post.call_args.args[0] == API_URL.format("sendPhoto")
        assert payload["photo"] == "https://example.com/cat.jpg"
        assert len(payload["caption"]) == 1024

    def test_no_caption_key_when_empty(self, telegram_client, mock_session):
        telegram_client.send_photo("10", "AgACAgIAAxkBAAI")

        assert "caption" not in posted_json(mock_session)

    def test_local_file_uploaded_as_multipart(
        self, telegram_client, mock_session, tmp_path
    ):
        photo = tmp_path / "chart.png"
        photo.write_bytes(b"\x89PNG")

        result = telegram_client.send_photo(
            "10", str(photo), caption="Weekly", buttons=[TelegramButton.link("Open", "https://x")]
        )

        assert result.ok is True
        kwargs = mock_session.post.call_args.kwargs
        assert "json" not in kwargs
        assert kwargs["data"]["chat_id"] == "10"
        assert kwargs["data"]["caption"] == "Weekly"
        assert "reply_markup" in kwargs["data"]
        assert kwargs["files"]["photo"][0] == "chart.png"

    def test_missing_local_file(self, telegram_client, mock_session, tmp_path):
        missing = str(tmp_path / "missing.png")

        result = telegram_client.send_photo("10", missing)

        assert result == TelegramApiResult(ok=False, error=f"File not found: {missing}")
        mock_session.post.assert_not_called()

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/tmp/photo.png", True),
            ("C:\\photos\\a.png", True),
            ("d:/photos/a.png", True),
            ("https://example.com/a.png", False),
            ("AgACAgIAAxkBAAI", False),
            ("relative/a.png", False),
        ],
    )
    def test_is_local_file_path(self, path, expected):
        assert is_local_file_path(path) is expected


class TestOtherMethods:
    """Tests for the remaining Bot API wrappers."""

    def test_answer_callback_query(self, telegram_client, mock_session):
        telegram_client.answer_callback_query("cb-1", "y" * 300, show_alert=True)

        payload = posted_json(mock_session)
        assert mock_session.post.call_args.args[0] == API_URL.format("answerCallbackQuery")
        assert payload["callback_query_id"] == "cb-1"
        assert len(payload["text"]) == 200
        assert payload["show_alert"] is True

    def test_edit_reply_markup_removes_keyboard(self, telegram_client, mock_session):
        telegram_client.edit_message_reply_markup("10", 5)

        payload = posted_json(mock_session)
        assert payload["message_id"] == 5
        assert json.loads(payload["reply_markup"]) == {"inline_keyboard": []}

    def test_edit_reply_markup_with_buttons(self, telegram_client, mock_session):
        telegram_client.edit_message_reply_markup(
            "10", 5, buttons=[TelegramButton.callback("Done", "done:5")]
        )

        markup = json.loads(posted_json(mock_session)["reply_markup"])
        assert markup["inline_keyboard"] == [[{"text": "Done", "callback_data": "done:5"}]]

    def test_edit_message_caption(self, telegram_client, mock_session):
        telegram_client.edit_message_caption("10", 5, "c" * 1500)

        payload = posted_json(mock_session)
        assert mock_session.post.call_args.args[0] == API_URL.format("editMessageCaption")
        assert len(payload["caption"]) == 1024
        assert payload["parse_mode"] == "Markdown"
        assert "reply_markup" not in payload

    def test_delete_message(self, telegram_client, mock_session, api_response):
        mock_session.post.return_value = api_response({"ok": True, "result": True})

        result = telegram_client.delete_message("10", 5)

        assert result.ok is True
        assert result.message_id is None
        assert posted_json(mock_session) == {"chat_id": "10", "message_id": 5}

    def test_send_sticker(self, telegram_client, mock_session):
        telegram_client.send_sticker("10", "CAACAgIAAxkBAAE")

        assert mock_session.post.call_args.args[0] == API_URL.format("sendSticker")
        assert posted_json(mock_session) == {"chat_id": "10", "sticker": "CAACAgIAAxkBAAE"}


class TestTelegramApiResult:
    """Tests for TelegramApiResult."""

    def test_to_dict(self):
        assert TelegramApiResult(ok=True, message_id=3, result={"message_id": 3}).to_dict() == {
            "ok": True,
            "message_id": 3,
            "result": {"message_id": 3},
        }
        assert TelegramApiResult(ok=False, error="nope").to_dict() == {
            "ok": False,
            "error": "nope",
        }
