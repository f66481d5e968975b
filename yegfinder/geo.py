"""Conversions between latitude/longitude and pixel positions on the city map."""

MAP_WIDTH = 2048
MAP_HEIGHT = 2048

LAT_NORTH = 5361858
LAT_SOUTH = 5340953
LON_WEST = -11368652
LON_EAST = -11333496


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def _to_int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def arduino_map(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Linearly rescale ``x`` from one integer range to another, truncating toward zero."""
    if in_max == in_min:
        raise ZeroDivisionError("input range is empty")
    return _trunc_div((x - in_min) * (out_max - out_min), in_max - in_min) + out_min


def constrain(value, low, high):
    """Clamp ``value`` into the closed interval [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def lon_to_x(lon: int) -> int:
    """Map a longitude (in 1e-5 degrees) to a map column."""
    return _to_int16(arduino_map(lon, LON_WEST, LON_EAST, 0, MAP_WIDTH))


def lat_to_y(lat: int) -> int:
    """Map a latitude (in 1e-5 degrees) to a map row."""
    return _to_int16(arduino_map(lat, LAT_NORTH, LAT_SOUTH, 0, MAP_HEIGHT))