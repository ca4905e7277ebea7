import logging
import uuid
from abc import ABC, abstractmethod
from typing import Callable, List

from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.storage import Store

from .accessory import PlatformAccessory
from .const import LOGGER_NAME, STORAGE_KEY, STORAGE_SAVE_DELAY, STORAGE_VERSION

_LOGGER = logging.getLogger(f"{LOGGER_NAME}_{__name__}")

# uuid5 命名空间,固定不变才能保证同一 device_id 得到同一标识
ACCESSORY_NAMESPACE = uuid.UUID("7d4b8d0a-5c8e-4f8e-9a43-3c1f2b7e9a10")


class BridgeHost(ABC):
    """平台依赖的桥接能力接口"""

    @abstractmethod
    def generate_uuid(self, data: str) -> str:
        """由 data 生成稳定的附件标识"""

    @abstractmethod
    def platform_accessory(self, display_name: str, accessory_uuid: str) -> PlatformAccessory:
        """创建新的附件记录"""

    @abstractmethod
    def register_platform_accessories(
        self, plugin_name: str, platform_name: str, accessories: List[PlatformAccessory]
    ) -> None:
        """注册并持久化新附件"""

    @abstractmethod
    def on_ready(self, callback: Callable[[], None]) -> None:
        """桥接启动完成后调用 callback"""


class HomeAssistantHost(BridgeHost):
    """基于 Home Assistant 的桥接实现,附件缓存保存在 .storage 中"""

    def __init__(self, hass: HomeAssistant, entry_id: str):
        self.hass = hass
        # 每个配置条目单独一份缓存
        self._store = Store(hass, STORAGE_VERSION, f"{STORAGE_KEY}_{entry_id}")
        self._ready_callbacks: List[Callable[[], None]] = []
        self._ready = False
        self.registered: List[PlatformAccessory] = []

    def generate_uuid(self, data: str) -> str:
        return str(uuid.uuid5(ACCESSORY_NAMESPACE, data))

    def platform_accessory(self, display_name: str, accessory_uuid: str) -> PlatformAccessory:
        return PlatformAccessory(display_name, accessory_uuid)

    def register_platform_accessories(self, plugin_name, platform_name, accessories):
        for accessory in accessories:
            if any(item.uuid == accessory.uuid for item in self.registered):
                continue
            self.registered.append(accessory)
        _LOGGER.info(f"注册附件 {plugin_name}/{platform_name}: {[a.display_name for a in accessories]}")
        self._store.async_delay_save(self._data_to_save, STORAGE_SAVE_DELAY)

    def on_ready(self, callback):
        self._ready_callbacks.append(callback)

    async def async_load_cached(self) -> List[PlatformAccessory]:
        """从存储中恢复已注册的附件"""
        data = await self._store.async_load()
        if not data:
            return []

        accessories = []
        for item in data.get("accessories", []):
            try:
                accessories.append(PlatformAccessory.from_dict(item))
            except KeyError as e:
                _LOGGER.warning(f"忽略损坏的附件缓存记录 {item}: 缺少 {e}")
        self.registered = list(accessories)
        _LOGGER.debug(f"已从缓存恢复 {len(accessories)} 个附件")
        return accessories

    @callback
    def async_fire_ready(self) -> None:
        """触发启动完成信号,只生效一次"""
        if self._ready:
            return
        self._ready = True
        for ready_callback in self._ready_callbacks:
            ready_callback()

    def _data_to_save(self):
        return {"accessories": [accessory.to_dict() for accessory in self.registered]}
