import logging

from ..accessory import PlatformAccessory
from ..const import (
    ACCESSORY_NAME,
    CHAR_MANUFACTURER,
    CHAR_MODEL,
    CHAR_NAME,
    CHAR_ON,
    CHAR_SERIAL_NUMBER,
    COMMAND_OFF,
    COMMAND_ON,
    COMMAND_STATUS,
    LOGGER_NAME,
    MANUFACTURER,
    MODEL,
    SERIAL_NUMBER,
    SERVICE_ACCESSORY_INFORMATION,
    SERVICE_SWITCH,
)
from ..exceptions import ServiceCommunicationError

_LOGGER = logging.getLogger(f"{LOGGER_NAME}_{__name__}")


class VektivaSwitch:
    """把附件的 On 特性绑定到平台的 API 请求"""
    def __init__(self, platform, accessory: PlatformAccessory):
        self.platform = platform
        self.accessory = accessory

        self.accessory.get_service(SERVICE_ACCESSORY_INFORMATION) \
            .set_characteristic(CHAR_MANUFACTURER, MANUFACTURER) \
            .set_characteristic(CHAR_MODEL, MODEL) \
            .set_characteristic(CHAR_SERIAL_NUMBER, SERIAL_NUMBER)

        self.service = (
            self.accessory.get_service(SERVICE_SWITCH)
            or self.accessory.add_service(SERVICE_SWITCH)
        )
        self.service.set_characteristic(CHAR_NAME, ACCESSORY_NAME)

        self.service.get_characteristic(CHAR_ON) \
            .on_set(self.set_on) \
            .on_get(self.get_on)

    async def set_on(self, value) -> None:
        command = COMMAND_ON if value else COMMAND_OFF
        success = await self.platform.make_api_request(command)
        if not success:
            _LOGGER.debug(f"{self.accessory.display_name} 执行 {command} 失败")
            raise ServiceCommunicationError(command)

    async def get_on(self) -> bool:
        # 请求失败与设备关闭都返回 False
        return await self.platform.make_api_request(COMMAND_STATUS)
