import numbers
from collections import namedtuple

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _type_error(kind, expected, value):
    return TypeError("{} field value must be {}, got `{}`".format(kind, expected, type(value).__name__))


class Float(namedtuple("Float", ["value"])):
    __slots__ = ()

    def __new__(cls, value):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise _type_error("Float", "a real number", value)
        return super(Float, cls).__new__(cls, float(value))

    def add_to_buf(self, buf):
        text = repr(self.value)
        # 整数值的浮点数不带 .0
        if text.endswith(".0"):
            text = text[:-2]
        buf.write(text)


class Integer(namedtuple("Integer", ["value"])):
    __slots__ = ()

    def __new__(cls, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise _type_error("Integer", "an int", value)
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError("integer field value {} out of int64 range".format(value))
        return super(Integer, cls).__new__(cls, int(value))

    def add_to_buf(self, buf):
        buf.write("{}i".format(self.value))


class String(namedtuple("String", ["value"])):
    __slots__ = ()

    def __new__(cls, value):
        if not isinstance(value, str):
            raise _type_error("String", "a str", value)
        return super(String, cls).__new__(cls, value)

    def add_to_buf(self, buf):
        buf.write('"')
        buf.write(self.value.replace('"', '\\"'))
        buf.write('"')


class Boolean(namedtuple("Boolean", ["value"])):
    __slots__ = ()

    def __new__(cls, value):
        if not isinstance(value, bool):
            raise _type_error("Boolean", "a bool", value)
        return super(Boolean, cls).__new__(cls, value)

    def add_to_buf(self, buf):
        buf.write("t" if self.value else "f")


VALUE_TYPES = (Float, Integer, String, Boolean)


def to_value(value):
    """Convert a native float/int/str/bool into a field value.

    Values that are already one of the field value types pass through.
    """
    if isinstance(value, VALUE_TYPES):
        return value
    # bool是int的子类，必须先判断
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, int):
        return Integer(value)
    if isinstance(value, float):
        return Float(value)
    if isinstance(value, str):
        return String(value)
    raise TypeError("unsupported field value type `{}`".format(type(value).__name__))
