from enum import StrEnum


class HandlerNames(StrEnum):
    FILE = "file"
    CONSOLE = "console"


class RendererNames(StrEnum):
    JSON = "json"
    CONSOLE = "console"
