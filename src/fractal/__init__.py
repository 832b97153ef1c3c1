from enum import StrEnum


class RenderPhase(StrEnum):
    FIRST_FRAME = "first_frame"
    SECOND_FRAME = "second_frame"
    STEADY_STATE = "steady_state"
