import os
import numpy as np
import tgawriter.utils as ut
import tgawriter.common as cm
from tgawriter.errors import AllocationFailure, OutOfBounds, SinkUnavailable, WriteError

class Color:
    def __init__(self, blue = 0, green = 0, red = 0, alpha = 255):
        self.blue = ut.check_u8('blue', blue)
        self.green = ut.check_u8('green', green)
        self.red = ut.check_u8('red', red)
        self.alpha = ut.check_u8('alpha', alpha)

    @classmethod
    def from_string(cls, string):
        """
        "B,G,R,A" -> Color, channels in wire order
        """
        return cls(*ut.parse_int_list(string, 4))

    @classmethod
    def from_bytes(cls, data):
        return cls(*data[:4])

    def to_bytes(self):
        return bytes([self.blue, self.green, self.red, self.alpha])

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self):
        return hash(self.to_bytes())

    def __repr__(self):
        return (
            f'{self.__class__.__name__}(blue={self.blue}, green={self.green}, '
            f'red={self.red}, alpha={self.alpha})'
        )


class TGAHeader:
    size = cm.header_size

    # (attribute, byte width), in wire order
    fields = [
        ('id_length', 1),
        ('color_map_type', 1),
        ('image_type', 1),
        ('color_map_origin', 2),
        ('color_map_length', 2),
        ('color_map_depth', 1),
        ('x_origin', 2),
        ('y_origin', 2),
        ('width', 2),
        ('height', 2),
        ('pixel_depth', 1),
        ('image_descriptor', 1)
    ]

    def __init__(self, width = 0, height = 0):
        self.id_length = 0
        self.color_map_type = 0
        self.image_type = cm.image_types['TRUE_COLOR']
        # Colormap specification
        self.color_map_origin = 0
        self.color_map_length = 0
        self.color_map_depth = 0
        # Image specification
        self.x_origin = 0
        self.y_origin = 0
        self.width = ut.check_u16('width', width)
        self.height = ut.check_u16('height', height)
        self.pixel_depth = cm.pixel_formats['BGRA32']
        self.image_descriptor = 0

    def get_bytes_per_pixel(self):
        return self.pixel_depth // 8

    def to_bytes(self):
        data = bytearray()
        for name, length in self.fields:
            data.extend(ut.i2b(getattr(self, name), length))
        if len(data) != self.size:
            raise ValueError(f"Header encoded to {len(data)} bytes, expected {self.size}")
        return bytes(data)

    def write(self, stream):
        _write_fully(stream, self.to_bytes())

    def __repr__(self):
        return (
            f'\nclass: {self.__class__.__name__}\n'
            f'image_type: {self.image_type}\n'
            f'resolution: {self.width}x{self.height}\n'
            f'pixel_depth: {self.pixel_depth}\n'
        )


class TGA:
    def __init__(self, width = 0, height = 0, blank_color = None, name = 'image'):
        self.name = name
        self.ext = cm.ext
        self.header = TGAHeader(width, height)
        if blank_color is None:
            blank_color = Color()
        self.data = self._allocate(blank_color)

    @property
    def width(self):
        return self.header.width

    @property
    def height(self):
        return self.header.height

    def get_data_size(self):
        return self.width * self.height * self.header.get_bytes_per_pixel()

    def get_name(self):
        name = self.name
        if not name.endswith(self.ext):
            name += self.ext
        return name

    def _allocate(self, blank_color):
        pixel_count = self.width * self.height
        try:
            data = np.tile(np.frombuffer(blank_color.to_bytes(), dtype=np.uint8), pixel_count)
        except MemoryError as e:
            raise AllocationFailure(
                f"Failed to allocate {self.get_data_size()} bytes for pixel array"
            ) from e
        if data.size != self.get_data_size():
            raise AllocationFailure(
                f"Pixel array holds {data.size} bytes, expected {self.get_data_size()}"
            )
        return data

    def pixel_offset(self, x, y, top_to_bottom = False):
        """
        Byte offset of pixel (x, y) in the buffer.

        Rows are stored bottom-to-top. With top_to_bottom set, y counts from
        the top row and is flipped before addressing.
        """
        x = ut.check_int('x', x)
        y = ut.check_int('y', y)
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            raise OutOfBounds(x, y, self.width, self.height)
        if top_to_bottom:
            y = self.height - 1 - y
        return (y * self.width + x) * self.header.get_bytes_per_pixel()

    def set_pixel(self, x, y, color, top_to_bottom = False):
        offset = self.pixel_offset(x, y, top_to_bottom)
        self.data[offset:offset + 4] = np.frombuffer(color.to_bytes(), dtype=np.uint8)

    def get_pixel(self, x, y, top_to_bottom = False):
        offset = self.pixel_offset(x, y, top_to_bottom)
        return Color.from_bytes(self.data[offset:offset + 4].tolist())

    def to_bytes(self):
        return self.header.to_bytes() + self.data.tobytes()

    def write(self, stream):
        self.header.write(stream)
        _write_fully(stream, self.data.tobytes())

    def save(self, path):
        if not os.path.exists(path):
            os.makedirs(path)
        file_path = os.path.join(path, self.get_name())
        write_image(file_path, self)
        return file_path

    def __repr__(self):
        return (
            f'\nclass: {self.__class__.__name__}\n'
            f'name: {self.name}\n'
            f'resolution: {self.width}x{self.height}\n'
            f'data_size: {self.data.size}\n'
        )


def _write_fully(stream, data):
    try:
        written = stream.write(data)
    except TypeError as e:
        raise WriteError(f"Sink does not accept bytes: {e}") from e
    except OSError as e:
        raise WriteError(f"Failed to write {len(data)} bytes: {e}") from e
    # raw streams may report a short write, None means nothing could be written
    if written is None or written != len(data):
        raise WriteError(f"Short write: {written or 0} of {len(data)} bytes written")


def create_image(width, height, blank_color):
    return TGA(width, height, blank_color)

def set_pixel(x, y, image, color, top_to_bottom = False):
    image.set_pixel(x, y, color, top_to_bottom)

def write_image(sink, image):
    """
    Writes header and pixel data of image to sink.

    sink is a file path, opened and closed here, or a writable binary
    stream, which is left open for its owner.
    """
    if not isinstance(sink, (str, bytes, os.PathLike)):
        image.write(sink)
        return
    try:
        stream = open(sink, 'wb')
    except OSError as e:
        raise SinkUnavailable(f"Failed to open {os.fsdecode(sink)}: {e}") from e
    with stream:
        image.write(stream)

def create_file(path, width, height, blank_color):
    write_image(path, create_image(width, height, blank_color))
