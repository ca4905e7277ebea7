import logging
from aiohttp import ClientSession
from homeassistant.const import Platform
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from .const import DOMAIN, LOGGER_NAME
from .host import HomeAssistantHost
from .platform import VektivaPlatform

_LOGGER = logging.getLogger(f"{LOGGER_NAME}_{__name__}")

PLATFORMS = [Platform.SWITCH]

async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    hass.data.setdefault(DOMAIN, {})

    session = ClientSession()
    host = HomeAssistantHost(hass, entry.entry_id)
    platform = VektivaPlatform(_LOGGER, entry.data, host, session)

    try:
        # 先恢复缓存的附件,再触发启动完成信号
        for accessory in await host.async_load_cached():
            platform.configure_accessory(accessory)
        host.async_fire_ready()

        hass.data[DOMAIN][entry.entry_id] = {
            "session": session,
            "host": host,
            "platform": platform,
        }

        await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    except Exception as e:
        _LOGGER.error(f"设置 Vektiva 集成时发生错误: {e}")
        hass.data[DOMAIN].pop(entry.entry_id, None)
        await session.close()
        return False

    _LOGGER.info(f"Vektiva 集成已成功初始化，添加了 {len(platform.switches)} 个开关")
    return True

async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)

    if unload_ok:
        data = hass.data[DOMAIN].pop(entry.entry_id, {})
        session = data.get("session")
        if session:
            await session.close()

        if not hass.data[DOMAIN]:
            hass.data.pop(DOMAIN)

        _LOGGER.info("Vektiva 集成已成功卸载")

    return unload_ok
