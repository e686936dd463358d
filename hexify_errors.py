class HexifyError(Exception):
    pass


class InvalidConfig(HexifyError, ValueError):
    """Rejected Format field."""

    def __init__(self, field, message):
        super().__init__(f"{field}: {message}")
        self.field = field


class SourceReadError(HexifyError, OSError):
    """The byte source failed while a line was being pulled."""

    def __init__(self, offset, cause):
        super().__init__(f"read failed at offset {offset:06x}: {cause}")
        self.offset = offset
