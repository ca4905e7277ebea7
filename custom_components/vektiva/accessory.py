from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Optional

from .const import SERVICE_ACCESSORY_INFORMATION

GetHandler = Callable[[], Awaitable[Any]]
SetHandler = Callable[[Any], Awaitable[None]]


class Characteristic:
    """单个可读写属性(例如开关的 On)"""
    def __init__(self, name: str, value: Any = None):
        self.name = name
        self.value = value
        self._get_handler: Optional[GetHandler] = None
        self._set_handler: Optional[SetHandler] = None

    def on_get(self, handler: GetHandler) -> "Characteristic":
        self._get_handler = handler
        return self

    def on_set(self, handler: SetHandler) -> "Characteristic":
        self._set_handler = handler
        return self

    async def async_handle_get(self) -> Any:
        """读取特性值,有绑定时每次都走回调"""
        if self._get_handler is None:
            return self.value
        return await self._get_handler()

    async def async_handle_set(self, value: Any) -> None:
        """写入特性值,回调抛出的异常原样向上传递"""
        if self._set_handler is not None:
            await self._set_handler(value)
            return
        self.value = value


class Service:
    """表示附件上的一个服务"""
    def __init__(self, service_type: str):
        self.service_type = service_type
        self.characteristics: Dict[str, Characteristic] = {}

    def get_characteristic(self, name: str) -> Characteristic:
        if name not in self.characteristics:
            self.characteristics[name] = Characteristic(name)
        return self.characteristics[name]

    def set_characteristic(self, name: str, value: Any) -> "Service":
        self.get_characteristic(name).value = value
        return self


class PlatformAccessory:
    """桥接端的附件记录"""
    def __init__(self, display_name: str, uuid: str):
        self.display_name = display_name
        self.uuid = uuid
        self.services: Dict[str, Service] = {}
        # 每个附件都自带设备信息服务
        self.add_service(SERVICE_ACCESSORY_INFORMATION)

    def get_service(self, service_type: str) -> Optional[Service]:
        return self.services.get(service_type)

    def add_service(self, service_type: str) -> Service:
        service = Service(service_type)
        self.services[service_type] = service
        return service

    def to_dict(self) -> Dict[str, str]:
        """用于缓存的序列化数据"""
        return {"uuid": self.uuid, "display_name": self.display_name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlatformAccessory":
        return cls(data["display_name"], data["uuid"])

    def __repr__(self):
        return f"PlatformAccessory({self.display_name!r}, {self.uuid!r})"
