"""Tests for the LabelMaker command-line interface."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from click.testing import CliRunner

from labelmaker import messages
from labelmaker.cli import main
from labelmaker.connection import ConnectionSettings, SettingsStore
from labelmaker.history import HistoryStore


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def configured():
    """Save connection settings to the isolated config dir."""
    SettingsStore().save(
        ConnectionSettings(endpoint="https://printer.test/print", auth_token="abcdef1234")
    )


def _ok_response():
    response = MagicMock()
    response.status_code = 200
    response.reason_phrase = "OK"
    return response


class TestConfigure:
    """Tests for the configure command."""

    def test_saves_settings(self, runner):
        """Should store endpoint and token."""
        result = runner.invoke(
            main, ["configure", "--endpoint", " https://printer.test/print ", "--token", "tok"]
        )

        assert result.exit_code == 0
        assert SettingsStore().load() == ConnectionSettings(
            endpoint="https://printer.test/print", auth_token="tok"
        )

    def test_prompts_for_missing_values(self, runner):
        """Should prompt when options are omitted."""
        result = runner.invoke(main, ["configure"], input="https://printer.test\nsecret\n")

        assert result.exit_code == 0
        assert SettingsStore().load().auth_token == "secret"


class TestStatus:
    """Tests for the status command."""

    def test_not_configured(self, runner):
        result = runner.invoke(main, ["status"])
        assert result.exit_code == 0
        assert "NOT CONFIGURED" in result.output

    def test_configured_masks_token(self, runner, configured):
        HistoryStore().save("Flour")

        result = runner.invoke(main, ["status"])

        assert result.exit_code == 0
        assert "https://printer.test/print" in result.output
        assert "...1234" in result.output
        assert "abcdef1234" not in result.output
        assert "History: 1 labels" in result.output


class TestPrint:
    """Tests for the print command."""

    def test_success(self, runner, configured):
        with patch(
            "httpx.AsyncClient.post", new_callable=AsyncMock, return_value=_ok_response()
        ) as mock_post:
            result = runner.invoke(main, ["print", "Flour", "--qty", "2"])

        assert result.exit_code == 0
        assert messages.PRINT_SUCCESS in result.output
        assert mock_post.call_args.kwargs["json"] == {"items": [{"body": "Flour", "qty": 2}]}
        assert HistoryStore().get_all() == ["Flour"]

    def test_network_error_exits_nonzero(self, runner, configured):
        with patch(
            "httpx.AsyncClient.post",
            new_callable=AsyncMock,
            side_effect=RuntimeError("Connection refused"),
        ):
            result = runner.invoke(main, ["print", "Flour"])

        assert result.exit_code == 1
        assert f"{messages.PRINT_ERROR}: Connection refused" in result.output
        assert HistoryStore().get_all() == []

    def test_empty_text(self, runner, configured):
        with patch("httpx.AsyncClient.post", new_callable=AsyncMock) as mock_post:
            result = runner.invoke(main, ["print", ""])

        assert result.exit_code == 1
        assert messages.EMPTY_ERROR in result.output
        mock_post.assert_not_called()

    def test_qty_limited(self, runner, configured):
        result = runner.invoke(main, ["print", "Flour", "--qty", "4"])
        assert result.exit_code == 2


class TestHistoryCommands:
    """Tests for history and clear-history."""

    def test_history_empty(self, runner):
        result = runner.invoke(main, ["history"])
        assert result.exit_code == 0
        assert "No labels printed yet." in result.output

    def test_history_lists_most_recent_first(self, runner):
        store = HistoryStore()
        store.save("Flour")
        store.save("Sugar")

        result = runner.invoke(main, ["history"])

        assert result.exit_code == 0
        assert result.output.index("Sugar") < result.output.index("Flour")

    def test_clear_history_with_confirmation(self, runner):
        HistoryStore().save("Flour")

        result = runner.invoke(main, ["clear-history"], input="y\n")

        assert result.exit_code == 0
        assert messages.HISTORY_CLEARED in result.output
        assert HistoryStore().get_all() == []

    def test_clear_history_aborted(self, runner):
        HistoryStore().save("Flour")

        result = runner.invoke(main, ["clear-history"], input="n\n")

        assert result.exit_code == 1
        assert HistoryStore().get_all() == ["Flour"]

    def test_clear_history_yes_flag(self, runner):
        HistoryStore().save("Flour")

        result = runner.invoke(main, ["clear-history", "--yes"])

        assert result.exit_code == 0
        assert HistoryStore().get_all() == []
