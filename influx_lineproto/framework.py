import os
import time
import logging

import toml

from influx_lineproto.const import *
from influx_lineproto.check import Checker
from influx_lineproto.protocol import LineProtoBuilder
from influx_lineproto.transmit import Connection

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARN,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class LineWriter(object):
    """Sends dict-shaped points to the database configured in a TOML file.

    The file has an ``[influxdb]`` section with the connection ``url``
    (and optionally ``timeout``) and a ``[log]`` section with ``log_file``
    and ``log_level``.
    """

    def init(self, toml_file):
        self._cfg = None
        self._toml_file = toml_file
        self._log_init(**self.section(LOG))
        self._checker = Checker()
        self._builder = LineProtoBuilder(self._checker)
        influx_cfg = self.section(INFLUX)
        if INFLUX_URL not in influx_cfg:
            raise KeyError("Expected a `{}` key in `{}` configuration section, but it missed.".format(INFLUX_URL, INFLUX))
        self._conn = Connection.connect(influx_cfg[INFLUX_URL],
                                        timeout=influx_cfg.get(INFLUX_TIMEOUT, DEFAULT_TIMEOUT))
        logging.info("LineWriter Start")
        logging.info("Influxdb database {} version {}".format(self._conn.db, self._conn.version))
        return self

    @property
    def cfg(self):
        if self._cfg is None:
            self._cfg = toml.load(self._toml_file)
        return self._cfg

    @property
    def connection(self):
        return self._conn

    def section(self, name):
        if name not in self.cfg:
            raise KeyError("Expected a `{}` section in {}, but it missed.".format(name, self._toml_file))
        return self.cfg[name]

    def _log_init(self, **kwargs):
        log_filename = kwargs.get(LOG_FILE, "")
        if log_filename != "":
            now = time.localtime(time.time())
            log_filename, ext_name = os.path.splitext(log_filename)
            log_filename += time.strftime("_%Y%m%d-%H%M%S", now)
            log_filename = "".join([log_filename, ext_name])
        level = _LOG_LEVELS.get(kwargs.get(LOG_LEVEL, "info").lower(), logging.INFO)

        logging.basicConfig(filename=log_filename or None,
                            format='%(asctime)s %(filename)s:%(lineno)d [%(levelname)s]:%(message)s',
                            filemode='w', level=level)
        logging.info("log file is {}".format(log_filename))

    def valid_points(self, data):
        for d in data:
            if not self._checker.check_point(d):
                logging.error("Check Point {} fail".format(d))
                continue
            yield d

    def build(self, data):
        return self._builder.build(self.valid_points(data))

    def send(self, data):
        """Build the valid points of `data` into one write; invalid points are logged and skipped.

        Returns the number of points written.
        """
        points = list(self.valid_points(data))
        if not points:
            logging.warning("no valid point to write")
            return 0
        self._conn.write(self._builder.build(points))
        return len(points)

    def close(self):
        self._conn.close()
