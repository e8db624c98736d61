import math
from collections.abc import Mapping

from influx_lineproto.const import POINT_MEASUREMENT, POINT_TAGS, POINT_FIELDS
from influx_lineproto.values import INT64_MIN, INT64_MAX


class Checker:
    def check_measurement(self, measurement):
        return isinstance(measurement, str) and measurement != ""

    def check_tags(self, tags):
        # tags可以为空
        if not tags:
            return True
        if not isinstance(tags, Mapping):
            return False
        return all(isinstance(k, str) and k != "" and isinstance(v, str)
                   for k, v in tags.items())

    def check_field_value(self, value):
        if isinstance(value, bool) or isinstance(value, str):
            return True
        if isinstance(value, int):
            return INT64_MIN <= value <= INT64_MAX
        if isinstance(value, float):
            # influxdb不接受nan/inf
            return math.isfinite(value)
        return False

    def check_fields(self, fields):
        # fields必须非空
        if not fields or not isinstance(fields, Mapping):
            return False
        return all(isinstance(k, str) and k != "" and self.check_field_value(v)
                   for k, v in fields.items())

    def check(self, measurement=None, tags=None, fields=None):
        return self.check_measurement(measurement) and self.check_tags(tags) and self.check_fields(fields)

    def check_point(self, point):
        if not isinstance(point, Mapping):
            return False
        return self.check(measurement=point.get(POINT_MEASUREMENT), tags=point.get(POINT_TAGS),
                          fields=point.get(POINT_FIELDS))
