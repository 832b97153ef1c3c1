from enum import StrEnum


class RenderMode(StrEnum):
    ANIMATED = "animated"
    STATIC = "static"
