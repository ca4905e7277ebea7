"""Switch platform for vektiva integration."""
from __future__ import annotations

import logging
from typing import Any

from homeassistant.components.switch import SwitchEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity import DeviceInfo
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import (
    CHAR_MANUFACTURER,
    CHAR_MODEL,
    CHAR_NAME,
    CHAR_ON,
    CHAR_SERIAL_NUMBER,
    DOMAIN,
    LOGGER_NAME,
    SERVICE_ACCESSORY_INFORMATION,
)
from .entity.switch_ctrl import VektivaSwitch

_LOGGER = logging.getLogger(f"{LOGGER_NAME}_{__name__}")


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up switch entities."""
    platform = hass.data[DOMAIN][entry.entry_id]["platform"]
    switch_entities = [VektivaSwitchEntity(switch) for switch in platform.switches]

    if switch_entities:
        async_add_entities(switch_entities, True)


class VektivaSwitchEntity(SwitchEntity):
    """Vektiva 开关实体,状态每次都从云端读取"""
    def __init__(self, switch: VektivaSwitch):
        self._switch = switch
        self._accessory = switch.accessory
        self._on = switch.service.get_characteristic(CHAR_ON)
        self._attr_unique_id = f"{DOMAIN}_{self._accessory.uuid}"
        self._attr_name = switch.service.get_characteristic(CHAR_NAME).value
        self._attr_is_on = None
        self._attr_should_poll = True

    @property
    def device_info(self):
        info = self._accessory.get_service(SERVICE_ACCESSORY_INFORMATION)
        return DeviceInfo(
            identifiers={(DOMAIN, self._accessory.uuid)},
            name=self._accessory.display_name,
            manufacturer=info.get_characteristic(CHAR_MANUFACTURER).value,
            model=info.get_characteristic(CHAR_MODEL).value,
            serial_number=info.get_characteristic(CHAR_SERIAL_NUMBER).value,
        )

    async def async_update(self) -> None:
        self._attr_is_on = await self._on.async_handle_get()

    async def async_turn_on(self, **kwargs: Any) -> None:
        await self._on.async_handle_set(True)
        self._attr_is_on = True
        _LOGGER.debug(f"{self._accessory.display_name} 已打开")

    async def async_turn_off(self, **kwargs: Any) -> None:
        await self._on.async_handle_set(False)
        self._attr_is_on = False
        _LOGGER.debug(f"{self._accessory.display_name} 已关闭")
