DOMAIN = "vektiva"

CONF_REMOTE_ID = "remote_id"
CONF_API_KEY = "api_key"
CONF_DEVICE_ID = "device_id"

# 桥接注册名
PLUGIN_NAME = "HomebridgeVektivaPlugin"
PLATFORM_NAME = "VektivaPlatform"

# API 地址
BASE_URL = "https://vektiva.online/api"
API_OK = "OK"

COMMAND_ON = "on"
COMMAND_OFF = "off"
COMMAND_STATUS = "status"

# 设备信息
ACCESSORY_NAME = "Vektiva Switch"
MANUFACTURER = "Vektiva"
MODEL = "Switch"
SERIAL_NUMBER = "Default-Serial"

# 服务与特性
SERVICE_ACCESSORY_INFORMATION = "AccessoryInformation"
SERVICE_SWITCH = "Switch"

CHAR_MANUFACTURER = "Manufacturer"
CHAR_MODEL = "Model"
CHAR_SERIAL_NUMBER = "SerialNumber"
CHAR_NAME = "Name"
CHAR_ON = "On"

STORAGE_VERSION = 1
STORAGE_KEY = "vektiva_accessories"
STORAGE_SAVE_DELAY = 10

# 日志
LOGGER_NAME = f"{DOMAIN}_logger"
