"""Vektiva 集成的异常定义"""
from homeassistant.exceptions import HomeAssistantError


class VektivaError(HomeAssistantError):
    """Vektiva 集成所有异常的基类"""


class ServiceCommunicationError(VektivaError):
    """云端 API 未确认开关命令时抛出"""

    def __init__(self, command: str):
        super().__init__(f"Vektiva 服务通信失败: {command}")
        self.command = command
