import voluptuous as vol
from homeassistant import config_entries
from .const import DOMAIN, ACCESSORY_NAME, CONF_REMOTE_ID, CONF_API_KEY, CONF_DEVICE_ID

DATA_SCHEMA = vol.Schema({
    vol.Required(CONF_REMOTE_ID): str,
    vol.Required(CONF_API_KEY): str,
    vol.Required(CONF_DEVICE_ID): str,
})


class VektivaConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Vektiva."""

    VERSION = 1

    async def async_step_user(self, user_input=None):
        """Handle the initial step."""
        errors = {}

        if user_input is not None:
            remote_id = (user_input.get(CONF_REMOTE_ID) or "").strip()
            api_key = (user_input.get(CONF_API_KEY) or "").strip()
            device_id = (user_input.get(CONF_DEVICE_ID) or "").strip()

            if not all([remote_id, api_key, device_id]):
                errors["base"] = "missing_fields"
            else:
                # 同一个设备只允许配置一次
                await self.async_set_unique_id(device_id)
                self._abort_if_unique_id_configured()
                return self.async_create_entry(
                    title=ACCESSORY_NAME,
                    data={
                        CONF_REMOTE_ID: remote_id,
                        CONF_API_KEY: api_key,
                        CONF_DEVICE_ID: device_id,
                    },
                )

        return self.async_show_form(
            step_id="user",
            data_schema=DATA_SCHEMA,
            errors=errors,
        )
