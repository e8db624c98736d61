"""Line protocol encoding.

A line is built in two phases: `LinesBuilder` accepts tags, and the first
`add_field` moves it to `LinesBuilderWithFields`, which accepts only more
fields. Only the fields phase can be finished into `Lines`, so every line
carries at least one field::

    lines = LinesBuilder("cpu") \\
        .add_tag("host", "server 01") \\
        .add_field("load", 0.64) \\
        .add_field("procs", 120) \\
        .build()
    lines.as_str()  # 'cpu,host=server\\ 01 load=0.64,procs=120i'

Every transition hands the buffer over to the next state; the previous
builder object is spent and raises `RuntimeError` if used again.
"""
import io
import logging

from influx_lineproto.check import Checker
from influx_lineproto.const import POINT_MEASUREMENT, POINT_TAGS, POINT_FIELDS
from influx_lineproto.values import to_value

logger = logging.getLogger(__name__)

_MEASUREMENT_ESCAPES = str.maketrans({",": "\\,", " ": "\\ "})
_KEY_ESCAPES = str.maketrans({",": "\\,", " ": "\\ ", "=": "\\="})


def _check_str(kind, text):
    if not isinstance(text, str):
        raise TypeError("{} must be a str, got `{}`".format(kind, type(text).__name__))


def escape_measurement(name):
    _check_str("measurement", name)
    # measurement中的 = 不需要转义
    return name.translate(_MEASUREMENT_ESCAPES)


def escape_key(key):
    """Escape a tag key, tag value or field key."""
    _check_str("key", key)
    return key.translate(_KEY_ESCAPES)


class _Phase(object):
    __slots__ = ("_buf",)

    @classmethod
    def _wrap(cls, buf):
        obj = cls.__new__(cls)
        obj._buf = buf
        return obj

    def _take(self):
        buf = self._buf
        if buf is None:
            raise RuntimeError("{} was already consumed by a previous call".format(type(self).__name__))
        self._buf = None
        return buf

    def _write_field(self, buf, key, value):
        buf.write(key)
        buf.write("=")
        value.add_to_buf(buf)


class LinesBuilder(_Phase):
    """Tags phase of a measurement line."""

    __slots__ = ()

    def __init__(self, measurement):
        self._buf = io.StringIO()
        self._buf.write(escape_measurement(measurement))

    @classmethod
    def _continue(cls, buf, name):
        # name已转义; 已有内容时先换行
        if buf.tell() > 0:
            buf.write("\n")
        buf.write(name)
        return cls._wrap(buf)

    def add_tag(self, key, value):
        key, value = escape_key(key), escape_key(value)
        buf = self._take()
        buf.write(",")
        buf.write(key)
        buf.write("=")
        buf.write(value)
        return LinesBuilder._wrap(buf)

    def add_field(self, key, value):
        key, value = escape_key(key), to_value(value)
        buf = self._take()
        # 第一个field前加空格
        buf.write(" ")
        self._write_field(buf, key, value)
        return LinesBuilderWithFields._wrap(buf)


class LinesBuilderWithFields(_Phase):
    """Fields phase of a measurement line: no more tags can be added."""

    __slots__ = ()

    def add_field(self, key, value):
        key, value = escape_key(key), to_value(value)
        buf = self._take()
        buf.write(",")
        self._write_field(buf, key, value)
        return LinesBuilderWithFields._wrap(buf)

    def add_line(self, measurement):
        name = escape_measurement(measurement)
        return LinesBuilder._continue(self._take(), name)

    def build(self):
        return Lines._of(self._take().getvalue())


class Lines(object):
    """Finished, immutable line protocol text."""

    __slots__ = ("_text",)

    def __init__(self):
        object.__setattr__(self, "_text", "")

    @classmethod
    def _of(cls, text):
        obj = cls.__new__(cls)
        object.__setattr__(obj, "_text", text)
        return obj

    def __setattr__(self, name, value):
        raise AttributeError("Lines is immutable")

    @classmethod
    def new(cls):
        return cls()

    @classmethod
    def from_str_unchecked(cls, text):
        """Wrap already formatted line protocol text as `Lines`.

        UNSAFE: this crosses the trust boundary. The text is neither escaped
        nor validated, and any malformed content is sent to the database as
        is, where it can corrupt or reject the whole write. Only pass text
        that is known to be valid line protocol.
        """
        return cls._of(str(text))

    def add_line(self, measurement):
        name = escape_measurement(measurement)
        buf = io.StringIO()
        buf.write(self._text)
        return LinesBuilder._continue(buf, name)

    def as_str(self):
        return self._text

    def is_empty(self):
        return self._text == ""

    def __str__(self):
        return self._text

    def __repr__(self):
        return "Lines({!r})".format(self._text)

    def __eq__(self, other):
        if isinstance(other, Lines):
            return self._text == other._text
        return NotImplemented

    def __hash__(self):
        return hash(self._text)


class LineProtoBuilder:
    def __init__(self, checker=None):
        self._checker = checker if checker is not None else Checker()

    def _append(self, head, measurement, tags, fields):
        # head是Lines或LinesBuilderWithFields
        if not fields:
            raise ValueError("measurement `{}` has no fields".format(measurement))
        builder = head.add_line(measurement)
        # tags可选
        if tags:
            for key, val in tags.items():
                builder = builder.add_tag(key, val)
        # fields必填
        for key, val in fields.items():
            builder = builder.add_field(key, val)
        return builder

    def add_point(self, lines, measurement=None, tags=None, fields=None):
        return self._append(lines, measurement, tags, fields).build()

    def build(self, points):
        head = Lines.new()
        for point in points:
            if not self._checker.check_point(point):
                raise ValueError("Check Point {} fail".format(point))
            head = self._append(head, point[POINT_MEASUREMENT], point.get(POINT_TAGS), point[POINT_FIELDS])
        lines = head.build() if isinstance(head, LinesBuilderWithFields) else head
        logger.debug("build line protocol:{}".format(lines.as_str()))
        return lines


def build_lines(points):
    return LineProtoBuilder().build(points)
