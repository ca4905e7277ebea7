import asyncio
import logging
from typing import Any, List, Mapping, Optional

import aiohttp

from .accessory import PlatformAccessory
from .const import (
    ACCESSORY_NAME,
    API_OK,
    BASE_URL,
    CONF_API_KEY,
    CONF_DEVICE_ID,
    CONF_REMOTE_ID,
    LOGGER_NAME,
    PLATFORM_NAME,
    PLUGIN_NAME,
)
from .entity.switch_ctrl import VektivaSwitch
from .host import BridgeHost

_LOGGER = logging.getLogger(f"{LOGGER_NAME}_{__name__}")


def build_base_url(remote_id: str, api_key: str, device_id: str) -> str:
    return f"{BASE_URL}/{remote_id}/{api_key}/{device_id}"


class VektivaPlatform:
    """Vektiva 云端平台: 负责配置、附件登记和 API 请求"""

    def __init__(
        self,
        log: Optional[logging.Logger],
        config: Mapping[str, Any],
        host: BridgeHost,
        session: aiohttp.ClientSession,
    ):
        self.log = log or _LOGGER
        self.host = host
        self._session = session
        self.accessories: List[PlatformAccessory] = []
        self.switches: List[VektivaSwitch] = []

        self.remote_id = config.get(CONF_REMOTE_ID)
        self.api_key = config.get(CONF_API_KEY)
        self.device_id = config.get(CONF_DEVICE_ID)
        self.api_base_url = build_base_url(self.remote_id, self.api_key, self.device_id)

        self.host.on_ready(self.discover_devices)

    def configure_accessory(self, accessory: PlatformAccessory) -> None:
        """桥接在启动时对每个缓存附件调用一次"""
        self.accessories.append(accessory)

    def discover_devices(self) -> None:
        accessory_uuid = self.host.generate_uuid(self.device_id)
        existing = next(
            (accessory for accessory in self.accessories if accessory.uuid == accessory_uuid),
            None,
        )

        if existing:
            self.configure_existing_accessory(existing)
        else:
            self.add_new_accessory(accessory_uuid)

    def configure_existing_accessory(self, accessory: PlatformAccessory) -> None:
        self.log.info(f"从缓存恢复附件: {accessory.display_name}")
        self.switches.append(VektivaSwitch(self, accessory))

    def add_new_accessory(self, accessory_uuid: str) -> None:
        self.log.info("添加新附件")
        accessory = self.host.platform_accessory(ACCESSORY_NAME, accessory_uuid)
        self.switches.append(VektivaSwitch(self, accessory))
        self.host.register_platform_accessories(PLUGIN_NAME, PLATFORM_NAME, [accessory])
        self.accessories.append(accessory)

    async def make_api_request(self, command: str) -> bool:
        """发送命令,只有响应内容恰好为 OK 时返回 True"""
        url = f"{self.api_base_url}/{command}"
        try:
            async with self._session.get(url) as response:
                response.raise_for_status()
                body = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.log.error(f"API 请求失败 ({command}): {e!r}")
            return False
        except Exception as e:
            self.log.error(f"API 请求发生意外错误 ({command}): {e!r}")
            return False

        if body != API_OK:
            self.log.debug(f"命令 {command} 的响应不是 {API_OK}: {body!r}")
            return False
        return True
