'''
Analytic diffusion profile across a planar interface

The profile is the error function solution of Fick's second law for a semi-infinite
body with a fixed surface concentration Cs and bulk concentration C0

    C(x,t) = Cs + (C0 - Cs) * erf(x / (2*sqrt(D*t)))

Positions are in micrometers, concentrations in wt.%
'''
from collections import namedtuple
from decimal import Decimal, ROUND_HALF_UP
import logging

import numpy as np

from alloycalc.diffusion.ErrorFunction import erf
from alloycalc.diffusion.DiffusionParameters import DiffusionParameters, DiffusionConstraints

_log = logging.getLogger(__name__)

DiffusionProfilePoint = namedtuple('DiffusionProfilePoint', ['position', 'concentration'])

DiffusionMeta = namedtuple('DiffusionMeta', ['temperature', 'time', 'diffusionCoefficient'])

_DiffusionResultBase = namedtuple('DiffusionResult',
                                  ['profile', 'penetrationDepthMicrometers', 'surfaceFluxMagnitude',
                                   'interfaceConcentration', 'meta', 'spanMicrometers'])

class DiffusionResult(_DiffusionResultBase):
    '''
    Output of the analytic diffusion calculation

    Attributes
    ----------
    profile : tuple[DiffusionProfilePoint]
        Points ordered by ascending position
    penetrationDepthMicrometers : float
        2*sqrt(Dt) in um, rounded to 1 decimal
    surfaceFluxMagnitude : float
        |C0 - Cs| * sqrt(D / (pi t))
    interfaceConcentration : float
        Concentration of the first point in the profile
    meta : DiffusionMeta
        Temperature, time and diffusion coefficient used for the calculation
    spanMicrometers : float
        Width of the sampled window (um)
    '''
    __slots__ = ()

    @property
    def positions(self):
        return np.array([p.position for p in self.profile])

    @property
    def concentrations(self):
        return np.array([p.concentration for p in self.profile])

    def toDict(self):
        '''
        Converts result to a JSON compatible dictionary
        '''
        return {
            'profile': [{'position': p.position, 'concentration': p.concentration} for p in self.profile],
            'penetrationDepthMicrometers': self.penetrationDepthMicrometers,
            'surfaceFluxMagnitude': self.surfaceFluxMagnitude,
            'interfaceConcentration': self.interfaceConcentration,
            'meta': dict(self.meta._asdict()),
        }

    @classmethod
    def fromDict(cls, data):
        '''
        Restores a result from the dictionary created by toDict
        '''
        profile = tuple(DiffusionProfilePoint(float(p['position']), float(p['concentration'])) for p in data['profile'])
        if len(profile) == 0:
            raise ValueError('Diffusion profile must contain at least one point')
        meta = data['meta']
        return cls(
            profile=profile,
            penetrationDepthMicrometers=float(data['penetrationDepthMicrometers']),
            surfaceFluxMagnitude=float(data['surfaceFluxMagnitude']),
            interfaceConcentration=float(data['interfaceConcentration']),
            meta=DiffusionMeta(float(meta['temperature']), float(meta['time']), float(meta['diffusionCoefficient'])),
            spanMicrometers=profile[-1].position,
        )

def _roundHalfUp(x, decimals = 0):
    '''
    Rounds the exact binary value of x to a number of decimals, ties going away from zero

    1.25 -> 1.3 and 6.25 -> 6.3 at one decimal, while 1.005 (stored as 1.00499...) -> 1.0 at two
    '''
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(float(x)).quantize(quantum, rounding=ROUND_HALF_UP))

def diffusionLength(D, t):
    '''
    Characteristic diffusion length 2*sqrt(Dt) (m)
    '''
    return 2*np.sqrt(D*t)

def plottingWindow(D, t, constraints = None):
    '''
    Width of the sampled window in um

    The window is windowWidths diffusion lengths (rounded to the nearest um),
    bounded by [minSpan, maxSpan]

    Parameters
    ----------
    D : float
        Diffusion coefficient (m2/s)
    t : float
        Time (s)
    constraints : DiffusionConstraints (optional)
    '''
    constraints = DiffusionConstraints() if constraints is None else constraints
    L_um = diffusionLength(D, t) * 1e6
    return max(constraints.minSpan, min(constraints.maxSpan, _roundHalfUp(constraints.windowWidths * L_um)))

class DiffusionProfileCalculator:
    '''
    Computes concentration profiles from DiffusionParameters

    Parameters
    ----------
    constraints : DiffusionConstraints (optional)
        Will use the default constraints if None
    '''
    def __init__(self, constraints = None):
        self.constraints = constraints if constraints is not None else DiffusionConstraints()

    def concentration(self, x_um, t, D, interfaceOffset = 0):
        '''
        Unrounded concentration at positions x_um, clamped to [minConcentration, maxConcentration]

        Parameters
        ----------
        x_um : float or array
            Positions (um)
        t : float
            Time (s), assumed to be already clamped
        D : float
            Diffusion coefficient (m2/s), assumed to be already clamped
        interfaceOffset : float
            Shift of the origin (um)
        '''
        c = self.constraints
        x_m = (np.asarray(x_um, dtype=np.float64) - interfaceOffset) * 1e-6
        C = c.surfaceConcentration + (c.bulkConcentration - c.surfaceConcentration) * erf(x_m / diffusionLength(D, t))
        return np.clip(C, c.minConcentration, c.maxConcentration)

    def compute(self, parameters = None, **kwargs):
        '''
        Computes the diffusion profile and summary metrics

        Parameters
        ----------
        parameters : DiffusionParameters | dict (optional)
            If None, parameters are built from kwargs
        kwargs
            Keyword arguments for DiffusionParameters if parameters is None
            Raises ValueError if given along with parameters

        Returns
        -------
        DiffusionResult
        '''
        if parameters is None:
            parameters = DiffusionParameters(**kwargs)
        else:
            if len(kwargs) > 0:
                raise ValueError('Keyword arguments cannot be used when parameters are supplied')
            if isinstance(parameters, dict):
                parameters = DiffusionParameters.fromDict(parameters)

        c = self.constraints
        t, D = parameters.clamped(c)
        if t != parameters.time or D != parameters.diffusionCoefficient:
            _log.debug('Clamped time %s -> %s s and diffusion coefficient %s -> %s m2/s',
                       parameters.time, t, parameters.diffusionCoefficient, D)

        span = plottingWindow(D, t, c)
        n = c.numPoints
        x_um = np.arange(n) / (n - 1) * span
        C = self.concentration(x_um, t, D, parameters.interfaceOffset)
        _log.debug('Sampling %d points over %s um (D = %s m2/s, t = %s s)', n, span, D, t)

        profile = tuple(DiffusionProfilePoint(_roundHalfUp(x, c.positionDecimals), _roundHalfUp(y, c.concentrationDecimals))
                        for x, y in zip(x_um, C))

        deltaC = abs(c.bulkConcentration - c.surfaceConcentration)
        return DiffusionResult(
            profile=profile,
            penetrationDepthMicrometers=_roundHalfUp(diffusionLength(D, t) * 1e6, 1),
            surfaceFluxMagnitude=float(deltaC * np.sqrt(D / (np.pi * t))),
            # The grid starts at x = 0, so the first point is reported regardless of interfaceOffset
            interfaceConcentration=profile[0].concentration,
            meta=DiffusionMeta(parameters.temperature, float(t), float(D)),
            spanMicrometers=float(span),
        )

def computeDiffusionProfile(parameters = None, constraints = None, **kwargs):
    '''
    Computes the analytic diffusion profile

    Parameters
    ----------
    parameters : DiffusionParameters | dict (optional)
    constraints : DiffusionConstraints (optional)
    kwargs
        Keyword arguments for DiffusionParameters if parameters is None

    Returns
    -------
    DiffusionResult
    '''
    return DiffusionProfileCalculator(constraints).compute(parameters, **kwargs)
