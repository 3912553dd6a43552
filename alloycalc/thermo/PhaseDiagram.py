'''
Mock binary phase diagram

Liquidus and solidus are parametric curves over composition and the
scatter points are random samples labeled by temperature band.
This is not a thermodynamic calculation and is only intended to provide
plausible data for previews
'''
from collections import namedtuple
import logging

import numpy as np

from alloycalc.thermo.utils import _get_rng, _process_temperature_range

_log = logging.getLogger(__name__)

PhaseBoundaryPoint = namedtuple('PhaseBoundaryPoint', ['composition', 'liquidus', 'solidus'])
ScatterPoint = namedtuple('ScatterPoint', ['x', 'y', 'phase', 'size'])

PHASE_LABELS = {'liquid': 'LIQUID', 'mixed': 'LIQ+SOL', 'solid': 'SOLID'}

class PhaseDiagramResult:
    '''
    Attributes
    ----------
    phaseData : list[PhaseBoundaryPoint]
        Liquidus/solidus temperature (K) vs. composition (%)
    scatterData : list[ScatterPoint]
    phases : dict[str, str]
        Display names for liquid, mixed and solid regions
    temperatureRange : tuple[float]
    '''
    def __init__(self, phaseData, scatterData, temperatureRange, phases = None):
        self.phaseData = list(phaseData)
        self.scatterData = list(scatterData)
        self.temperatureRange = temperatureRange
        self.phases = dict(PHASE_LABELS) if phases is None else dict(phases)

    @property
    def composition(self):
        return np.array([p.composition for p in self.phaseData])

    @property
    def liquidus(self):
        return np.array([p.liquidus for p in self.phaseData])

    @property
    def solidus(self):
        return np.array([p.solidus for p in self.phaseData])

    def toDict(self):
        return {
            'phaseData': [dict(p._asdict()) for p in self.phaseData],
            'scatterData': [dict(p._asdict()) for p in self.scatterData],
            'phases': dict(self.phases),
        }

def _classifyPhase(T, Tmin, Tmax):
    if T > (Tmin + Tmax) / 2:
        return 'liquid'
    elif T > Tmin + (Tmax - Tmin) * 0.35:
        return 'mixed'
    else:
        return 'solid'

def phaseBoundaries(temperatureRange = None, n = 41):
    '''
    Liquidus and solidus curves

    liquidus = Tmax - (Tmax - Tmin) * x * (0.7 + 0.15 sin(pi x))
    solidus = Tmin + 0.15 (Tmax - Tmin) cos(pi x) + 20
    where x is the composition fraction

    Parameters
    ----------
    temperatureRange : tuple | dict (optional)
        (Tmin, Tmax), defaults to (900, 1800)
    n : int
        Number of compositions between 0 and 100%

    Returns
    -------
    list[PhaseBoundaryPoint]
    '''
    if n < 2:
        raise ValueError(f'At least 2 compositions are needed for the phase boundaries, got {n}')
    Tmin, Tmax = _process_temperature_range(temperatureRange)
    x = np.arange(n) / (n - 1) * 100
    curve = np.sin(x / 100 * np.pi) * 0.15
    liquidus = Tmax - (Tmax - Tmin) * (x / 100) * (0.7 + curve)
    solidus = Tmin + (Tmax - Tmin) * 0.15 * np.cos(x / 100 * np.pi) + 20
    return [PhaseBoundaryPoint(float(c), float(l), float(s))
            for c, l, s in zip(np.round(x, 1), np.round(liquidus, 1), np.round(solidus, 1))]

def generatePhaseDiagram(temperatureRange = None, n = 41, numScatter = 60, rng = None, seed = None):
    '''
    Generates a mock phase diagram

    Parameters
    ----------
    temperatureRange : tuple | dict (optional)
        (Tmin, Tmax), defaults to (900, 1800)
    n : int (optional)
        Number of points along the phase boundaries
        Defaults to 41
    numScatter : int (optional)
        Number of random scatter points
        Defaults to 60
    rng : numpy.random.Generator (optional)
    seed : int (optional)
        Used to create a Generator if rng is None

    Returns
    -------
    PhaseDiagramResult
    '''
    rng = _get_rng(rng, seed)
    Tmin, Tmax = _process_temperature_range(temperatureRange)
    phaseData = phaseBoundaries((Tmin, Tmax), n)

    scatterData = []
    for _ in range(numScatter):
        x = rng.random() * 100
        # Spread over the central band of the temperature range
        y = Tmin + (Tmax - Tmin) * (0.2 + 0.6 * rng.random())
        size = 2 + rng.random() * 4
        scatterData.append(ScatterPoint(round(x, 1), round(y, 1), _classifyPhase(y, Tmin, Tmax), size))

    _log.debug('Generated phase diagram with %d boundary points and %d scatter points between %s and %s K',
               n, numScatter, Tmin, Tmax)
    return PhaseDiagramResult(phaseData, scatterData, (Tmin, Tmax))
