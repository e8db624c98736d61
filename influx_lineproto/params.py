import logging
from collections import namedtuple
from urllib.parse import urlsplit, unquote

from influx_lineproto.const import DEFAULT_PORT, SUPPORTED_SCHEMES, PARAM_USER, PARAM_PASSWORD
from influx_lineproto.errors import InvalidUrlError, UnsupportedProtocolError

logger = logging.getLogger(__name__)


class Credential(namedtuple("Credential", ["username", "password", "has_auth"])):
    __slots__ = ()

    @classmethod
    def anonymous(cls):
        return cls("", "", False)

    def query_params(self):
        if not self.has_auth:
            return {}
        return {PARAM_USER: self.username, PARAM_PASSWORD: self.password}

    def __repr__(self):
        # 不输出密码
        return "Credential(username={!r}, has_auth={!r})".format(self.username, self.has_auth)


class ConnectParams:
    """Where and as whom to connect, parsed from a connection URL.

    The URL has the form ``http://[user:password@]host[:port]/database``.
    The port defaults to 8086, and credentials are only used when both the
    user and the password are given.
    """

    def __init__(self, url, port, credential, db):
        self.url = url
        self.port = port
        self.credential = credential
        self.db = db

    @classmethod
    def from_url(cls, in_url):
        try:
            parts = urlsplit(in_url)
            port = parts.port
        except ValueError as e:
            logger.error("can not parse url {}: {}".format(in_url, e))
            raise InvalidUrlError(in_url) from e
        logger.debug("Url parsed")

        scheme = parts.scheme.lower()
        if scheme not in SUPPORTED_SCHEMES:
            raise UnsupportedProtocolError(parts.scheme)

        host = parts.hostname
        if not host:
            raise InvalidUrlError(in_url)
        if port is None:
            port = DEFAULT_PORT

        if parts.username and parts.password:
            credential = Credential(unquote(parts.username), unquote(parts.password), True)
        else:
            credential = Credential.anonymous()

        db = parts.path[1:]
        if ":" in host:
            host = "[{}]".format(host)
        base_url = "{}://{}:{}/".format(scheme, host, port)
        logger.debug("Base Url recreated: {}".format(base_url))
        return cls(url=base_url, port=port, credential=credential, db=db)

    def __repr__(self):
        return "ConnectParams(url={!r}, db={!r}, credential={!r})".format(self.url, self.db, self.credential)
