from .ErrorFunction import erf, erfc
from .DiffusionParameters import DiffusionParameters, DiffusionConstraints, BoundaryCondition, InvalidParameterError
from .Analytic import DiffusionProfileCalculator, DiffusionResult, DiffusionProfilePoint, DiffusionMeta
from .Analytic import computeDiffusionProfile, plottingWindow, diffusionLength
from .Formatting import penetrationDepthDisplay, fluxRateDisplay, interfaceConcentrationDisplay, elapsedTimeHoursDisplay
from .Formatting import scientificDisplay, formatDiffusionResult
