from enum import Enum


class LegName(Enum):
    """The six legs, in index order around the chassis."""

    FRONT_LEFT = 'FL'
    FRONT_RIGHT = 'FR'
    MID_RIGHT = 'MR'
    BACK_RIGHT = 'BR'
    BACK_LEFT = 'BL'
    MID_LEFT = 'ML'
