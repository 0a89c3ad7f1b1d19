class TGAError(Exception):
    pass

class AllocationFailure(TGAError, MemoryError):
    pass

class OutOfBounds(TGAError, IndexError):
    def __init__(self, x, y, width, height):
        super().__init__(f"Pixel ({x}, {y}) is outside a {width}x{height} image")
        self.x = x
        self.y = y
        self.width = width
        self.height = height

class SinkUnavailable(TGAError, OSError):
    pass

class WriteError(TGAError, OSError):
    pass
