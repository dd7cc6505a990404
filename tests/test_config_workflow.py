"""
Tests for the config command workflow
"""
from unittest.mock import MagicMock

import pytest

from rusend.features.config import ConfigWorkflow, configure
from rusend.features.config.workflow import KEY_PROMPT
from rusend.utils.config_manager import AppConfig
from rusend.utils.errors import MissingCredentialsError


class TestConfigure:
    """Tests for merging flags into the stored config"""

    @pytest.mark.asyncio
    async def test_key_flag_saves_without_prompt(self, config_store, output):
        console, buffer = output
        prompt = MagicMock()

        assert await configure(config_store, key="re_new", prompt=prompt, console=console)

        prompt.assert_not_called()
        assert config_store.load() == AppConfig(api_key="re_new")
        assert "Configuration saved." in buffer.getvalue()

    @pytest.mark.asyncio
    async def test_prompts_when_no_key_stored(self, config_store, output):
        prompt = MagicMock(return_value="  re_typed  ")
        workflow = ConfigWorkflow(config_store, prompt, output[0], output[0])

        await workflow.configure()

        prompt.assert_called_once_with(KEY_PROMPT)
        assert config_store.load().api_key == "re_typed"

    @pytest.mark.asyncio
    async def test_defaults_overlay_stored_key(self, config_store, output):
        config_store.save(AppConfig(api_key="re_keep", default_to="old@x.com"))
        prompt = MagicMock()
        workflow = ConfigWorkflow(config_store, prompt, output[0], output[0])

        await workflow.configure(default_from="Me <me@x.com>")

        prompt.assert_not_called()
        assert config_store.load() == AppConfig(
            api_key="re_keep", default_from="Me <me@x.com>", default_to="old@x.com"
        )

    @pytest.mark.asyncio
    async def test_empty_default_clears_it(self, config_store, output):
        config_store.save(AppConfig(api_key="re_keep", default_to="old@x.com"))
        workflow = ConfigWorkflow(config_store, MagicMock(), output[0], output[0])

        await workflow.configure(default_to="")

        assert config_store.load().default_to is None

    @pytest.mark.asyncio
    async def test_prompt_cancelled(self, config_store, output):
        workflow = ConfigWorkflow(config_store, MagicMock(return_value=None), output[0], output[0])

        with pytest.raises(MissingCredentialsError, match="No API key entered"):
            await workflow.configure()

        assert not config_store.path.exists()

    @pytest.mark.asyncio
    async def test_legacy_file_is_rewritten_as_json(self, config_store, output):
        config_store.path.parent.mkdir(parents=True)
        config_store.path.write_text("re_legacy", encoding="utf-8")
        workflow = ConfigWorkflow(config_store, MagicMock(), output[0], output[0])

        await workflow.configure(default_to="a@x.com")

        assert config_store.path.read_text(encoding="utf-8").startswith("{")
        assert config_store.load() == AppConfig(api_key="re_legacy", default_to="a@x.com")

    @pytest.mark.asyncio
    async def test_corrupted_file_is_replaced(self, config_store, output, error_output):
        config_store.path.parent.mkdir(parents=True)
        config_store.path.write_text('{"api_key": ', encoding="utf-8")
        error_console, error_buffer = error_output
        workflow = ConfigWorkflow(config_store, MagicMock(), output[0], error_console)

        await workflow.configure(key="re_fresh")

        assert "Warning:" in error_buffer.getvalue()
        assert config_store.load() == AppConfig(api_key="re_fresh")

    @pytest.mark.asyncio
    async def test_non_utf8_file_is_replaced(self, config_store, output, error_output):
        config_store.path.parent.mkdir(parents=True)
        config_store.path.write_bytes(b"\xff\xfe\x00garbage")
        error_console, error_buffer = error_output
        workflow = ConfigWorkflow(config_store, MagicMock(), output[0], error_console)

        await workflow.configure(key="re_new_key")

        assert "not valid UTF-8" in error_buffer.getvalue()
        assert config_store.load() == AppConfig(api_key="re_new_key")

    @pytest.mark.asyncio
    async def test_saved_panel_masks_key(self, config_store, output):
        console, buffer = output

        await configure(config_store, key="re_1234567890abc", console=console)

        rendered = buffer.getvalue()
        assert "re_1234567890abc" not in rendered
        assert "(not set)" in rendered
