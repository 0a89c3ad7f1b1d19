import os
import numpy as np

endian = 'little'

# int to bytes
def i2b(num, length = 4):
    return num.to_bytes(length, byteorder=endian)

def check_int(name, value):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)

def check_u16(name, value):
    value = check_int(name, value)
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"{name} must fit in 16 bits, got {value}")
    return value

def check_u8(name, value):
    value = check_int(name, value)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must fit in 8 bits, got {value}")
    return value

def parse_int_list(string, count):
    """
    parses "1,2,3" into a list of exactly count ints
    """
    parts = [part.strip() for part in str(string).split(',')]
    if len(parts) != count:
        raise ValueError(f"Expected {count} comma separated values, got '{string}'")
    try:
        return [int(part) for part in parts]
    except ValueError:
        raise ValueError(f"Expected integers, got '{string}'")

def uniquify(path):
    name, ext = os.path.splitext(path)
    count = 0

    while os.path.exists(path):
        path = f'{name}_{count}{ext}'
        count += 1

    return path

def getSettingsOrAddDefault(settings, name, defaultValue):
    ret = settings.value(name)
    if(ret == None):
        ret = defaultValue
        settings.setValue(name, ret)
    return ret
