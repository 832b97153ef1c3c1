from fractal.programs.errors import ConstructionError as ConstructionError
from fractal.programs.errors import \
    IterationRangeError as IterationRangeError
from fractal.programs.errors import \
    UnknownProgramError as UnknownProgramError
from fractal.programs.registry import ChaosGameRegistry as ChaosGameRegistry
from fractal.programs.registry import CurveRegistry as CurveRegistry
