"""
Tests for the Vektiva config flow.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
import voluptuous as vol

from custom_components.vektiva.config_flow import DATA_SCHEMA, VektivaConfigFlow
from custom_components.vektiva.const import CONF_API_KEY, CONF_DEVICE_ID, CONF_REMOTE_ID


def _flow():
    flow = VektivaConfigFlow()
    flow.async_show_form = MagicMock(return_value={"type": "form"})
    flow.async_create_entry = MagicMock(return_value={"type": "create_entry"})
    flow.async_set_unique_id = AsyncMock()
    flow._abort_if_unique_id_configured = MagicMock()
    return flow


class TestConfigFlow:
    """Tests for VektivaConfigFlow"""

    def test_schema_requires_all_fields(self):
        with pytest.raises(vol.Invalid):
            DATA_SCHEMA({CONF_REMOTE_ID: "r1", CONF_API_KEY: "k1"})

    @pytest.mark.asyncio
    async def test_shows_form_without_input(self):
        flow = _flow()
        await flow.async_step_user()
        flow.async_show_form.assert_called_once()
        assert flow.async_show_form.call_args.kwargs["errors"] == {}

    @pytest.mark.asyncio
    async def test_empty_field_is_rejected(self):
        flow = _flow()
        await flow.async_step_user({CONF_REMOTE_ID: "r1", CONF_API_KEY: " ", CONF_DEVICE_ID: "d1"})
        assert flow.async_show_form.call_args.kwargs["errors"] == {"base": "missing_fields"}
        flow.async_create_entry.assert_not_called()

    @pytest.mark.asyncio
    async def test_creates_entry(self):
        flow = _flow()
        await flow.async_step_user({CONF_REMOTE_ID: "r1", CONF_API_KEY: "k1", CONF_DEVICE_ID: "d1"})
        flow.async_set_unique_id.assert_awaited_once_with("d1")
        flow.async_create_entry.assert_called_once_with(
            title="Vektiva Switch",
            data={CONF_REMOTE_ID: "r1", CONF_API_KEY: "k1", CONF_DEVICE_ID: "d1"},
        )
