from enum import Enum
import numbers

import numpy as np

class InvalidParameterError(ValueError):
    '''
    Raised when a diffusion parameter cannot be used to compute a profile

    Degenerate but finite values (zero or negative time/diffusivity) are clamped
    by the calculator instead, so this is only raised for non-finite or non-numeric inputs
    and unknown boundary conditions
    '''
    pass

class BoundaryCondition(Enum):
    '''
    Boundary condition at the surface

    Only the fixed surface concentration solution is computed. The other options
    are stored with the parameters but do not change the profile
    '''
    FIXED = 'fixed'
    FLUX = 'flux'
    INFINITE = 'infinite'

    @classmethod
    def parse(cls, value):
        '''
        Converts a BoundaryCondition or case insensitive string to a BoundaryCondition

        Parameters
        ----------
        value : BoundaryCondition | str
        '''
        if isinstance(value, BoundaryCondition):
            return value
        if isinstance(value, str):
            for bc in cls:
                if value.strip().lower() in (bc.value, bc.name.lower()):
                    return bc
        raise InvalidParameterError(f'Boundary condition must be one of {[bc.value for bc in cls]}, got {value!r}')

class DiffusionConstraints:
    '''
    Constants and numerical limits for the analytic diffusion profile

    Attributes
    ----------
    minTime : float
        Floor for diffusion time (s)
    minDiffusionCoefficient : float
        Floor for diffusion coefficient (m2/s)
    surfaceConcentration : float
        Concentration at the surface, Cs (wt.%)
    bulkConcentration : float
        Concentration of the bulk, C0 (wt.%)
    numPoints : int
        Number of points sampled along the profile
    windowWidths : float
        Plotting window as a multiple of the diffusion length 2*sqrt(Dt)
    minSpan, maxSpan : float
        Bounds of the plotting window (um)
    positionDecimals, concentrationDecimals : int
        Rounding applied to the stored profile
    minConcentration, maxConcentration : float
        Bounds the concentration is clamped to (wt.%)
    '''
    def __init__(self):
        self.reset()

    def reset(self):
        self.minTime = 1
        self.minDiffusionCoefficient = 1e-20

        self.surfaceConcentration = 0
        self.bulkConcentration = 100

        self.numPoints = 121
        self.windowWidths = 6
        self.minSpan = 50
        self.maxSpan = 1000

        self.positionDecimals = 1
        self.concentrationDecimals = 2
        self.minConcentration = 0
        self.maxConcentration = 100

def _checkFinite(name, value):
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, np.floating, np.integer)):
        raise InvalidParameterError(f'{name} must be a real number, got {value!r}')
    if not np.isfinite(value):
        raise InvalidParameterError(f'{name} must be finite, got {value}')
    return float(value)

class DiffusionParameters:
    '''
    Inputs to the analytic diffusion profile

    Parameters
    ----------
    temperature : float (optional)
        Temperature (K). Only carried through to the result metadata
        Defaults to 1200
    time : float (optional)
        Diffusion time (s)
        Defaults to 3600
    diffusionCoefficient : float (optional)
        Diffusion coefficient (m2/s)
        Defaults to 1e-12
    interfaceOffset : float (optional)
        Shift of the coordinate origin (um)
        Defaults to 0
    boundaryCondition : BoundaryCondition | str (optional)
        Defaults to BoundaryCondition.FIXED
    '''
    # Maps keys used by the input form to attribute names
    KEY_ALIASES = {
        'temperature': 'temperature',
        'T': 'temperature',
        'time': 'time',
        't': 'time',
        'diffusionCoefficient': 'diffusionCoefficient',
        'diffusion_coefficient': 'diffusionCoefficient',
        'D': 'diffusionCoefficient',
        'interfaceOffset': 'interfaceOffset',
        'interface_position': 'interfaceOffset',
        'interfacePosition': 'interfaceOffset',
        'boundaryCondition': 'boundaryCondition',
        'boundary_conditions': 'boundaryCondition',
        'boundaryConditions': 'boundaryCondition',
    }

    def __init__(self, temperature = 1200, time = 3600, diffusionCoefficient = 1e-12,
                 interfaceOffset = 0, boundaryCondition = BoundaryCondition.FIXED):
        self.temperature = _checkFinite('temperature', temperature)
        self.time = _checkFinite('time', time)
        self.diffusionCoefficient = _checkFinite('diffusionCoefficient', diffusionCoefficient)
        self.interfaceOffset = _checkFinite('interfaceOffset', interfaceOffset)
        self.boundaryCondition = BoundaryCondition.parse(boundaryCondition)

    def __repr__(self):
        return (f'DiffusionParameters(temperature={self.temperature}, time={self.time}, '
                f'diffusionCoefficient={self.diffusionCoefficient}, interfaceOffset={self.interfaceOffset}, '
                f'boundaryCondition={self.boundaryCondition.value!r})')

    def __eq__(self, other):
        if not isinstance(other, DiffusionParameters):
            return NotImplemented
        return self.toDict() == other.toDict()

    def clamped(self, constraints = None):
        '''
        Returns (time, diffusionCoefficient) raised to the floors in constraints

        Parameters
        ----------
        constraints : DiffusionConstraints (optional)
        '''
        constraints = DiffusionConstraints() if constraints is None else constraints
        t = max(self.time, constraints.minTime)
        D = max(self.diffusionCoefficient, constraints.minDiffusionCoefficient)
        return t, D

    def toDict(self):
        return {
            'temperature': self.temperature,
            'time': self.time,
            'diffusionCoefficient': self.diffusionCoefficient,
            'interfaceOffset': self.interfaceOffset,
            'boundaryCondition': self.boundaryCondition.value,
        }

    @classmethod
    def fromDict(cls, data):
        '''
        Creates parameters from a request dictionary

        Both the camelCase keys of the calculation request and the snake_case keys of
        the input form are accepted. Missing or None values take the default

        Parameters
        ----------
        data : dict
        '''
        kwargs = {}
        for key, value in data.items():
            if key not in cls.KEY_ALIASES:
                raise InvalidParameterError(f'Unknown diffusion parameter {key!r}')
            if value is None:
                continue
            kwargs[cls.KEY_ALIASES[key]] = value
        return cls(**kwargs)
