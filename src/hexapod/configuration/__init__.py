from ._gait_parameters import DEFAULT_PARAMETERS_PATH, GaitParameters
from ._leg_config import DEFAULT_LEGS, LegConfig
from ._leg_name import LegName

__all__ = ["GaitParameters", "DEFAULT_PARAMETERS_PATH", "LegConfig", "LegName", "DEFAULT_LEGS"]
