DEFAULT_PORT = 8086
DEFAULT_TIMEOUT = 5

STATUS_NO_CONTENT = 204
VERSION_HEADER = "X-Influxdb-Version"
CONTENT_TYPE = "text/plain; charset=utf-8"

PING_ROUTE = "ping"
WRITE_ROUTE = "write"
PARAM_DB = "db"
PARAM_USER = "u"
PARAM_PASSWORD = "p"

SUPPORTED_SCHEMES = ("http", "https")

# point字典的键名
POINT_MEASUREMENT = "measurement"
POINT_TAGS = "tags"
POINT_FIELDS = "fields"

# influxdb配置名常量
INFLUX = "influxdb"
INFLUX_URL = "url"
INFLUX_TIMEOUT = "timeout"

#日志配置常量
LOG = "log"
LOG_FILE  = "log_file"
LOG_LEVEL = "log_level"
