class InfluxError(Exception):
    """Base class for connection and write failures."""


class InvalidUrlError(InfluxError):
    def __init__(self, url):
        super(InvalidUrlError, self).__init__("invalid url: '{}'".format(url))
        self.url = url


class UnsupportedProtocolError(InfluxError):
    def __init__(self, scheme):
        super(UnsupportedProtocolError, self).__init__("unsupported protocol: '{}'".format(scheme))
        self.scheme = scheme


class NetworkError(InfluxError):
    pass


class HttpError(InfluxError):
    """The server answered with a status other than 204 No Content."""

    def __init__(self, status_code, text=""):
        super(HttpError, self).__init__("http error: '{}'".format(status_code))
        self.status_code = status_code
        self.text = text


class InvalidVersionHeaderError(InfluxError):
    def __init__(self, value=None):
        if value is None:
            msg = "Influxdb doesn't respond with a version header"
        else:
            msg = "Influxdb responds with an unparseable version header: '{}'".format(value)
        super(InvalidVersionHeaderError, self).__init__(msg)
        self.value = value
