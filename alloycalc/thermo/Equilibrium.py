'''
Mock equilibrium calculation

Phase fractions, phase compositions and properties are drawn from a random
generator. No Gibbs energy minimization is performed
'''
from collections import namedtuple
import logging

import numpy as np

from alloycalc.thermo.utils import _get_rng

_log = logging.getLogger(__name__)

PhaseFraction = namedtuple('PhaseFraction', ['name', 'value'])
PhaseComposition = namedtuple('PhaseComposition', ['name', 'composition'])

DEFAULT_ELEMENTS = ['Fe', 'C']

class EquilibriumResult:
    '''
    Attributes
    ----------
    phaseFractions : list[PhaseFraction]
        Fractions sum to 1
    phaseCompositions : list[PhaseComposition]
    properties : dict[str, str]
        Formatted gibbs_energy, enthalpy and entropy
    conditions : dict
        Temperature (T), pressure (P) and composition
    '''
    def __init__(self, phaseFractions, phaseCompositions, properties, conditions):
        self.phaseFractions = list(phaseFractions)
        self.phaseCompositions = list(phaseCompositions)
        self.properties = dict(properties)
        self.conditions = dict(conditions)

    @property
    def phases(self):
        return [pf.name for pf in self.phaseFractions]

    def phaseFraction(self, phase):
        '''
        Fraction of phase, 0 if phase is not present
        '''
        for pf in self.phaseFractions:
            if pf.name == phase:
                return pf.value
        return 0

    def toDict(self):
        return {
            'phaseFractions': [{'name': pf.name, 'value': pf.value} for pf in self.phaseFractions],
            'phaseCompositions': [{'name': pc.name, 'composition': dict(pc.composition)} for pc in self.phaseCompositions],
            'properties': dict(self.properties),
            'conditions': {'T': self.conditions['T'], 'P': self.conditions['P'], 'composition': dict(self.conditions['composition'])},
        }

def _splitFractions(rng):
    '''
    Random split into three fractions (a, b, c) with a + b + c = 1 and 0.2 < a < 0.8
    '''
    a = rng.random() * 0.6 + 0.2
    b = (1 - a) * (rng.random() * 0.7)
    c = 1 - a - b
    return a, b, c

def generateEquilibrium(elements = None, temperature = 1200, pressure = 101325, composition = None, rng = None, seed = None):
    '''
    Generates a mock equilibrium result

    Three phases (FCC_A1, BCC_A2, LIQUID) are reported if the third fraction is above 0.1,
    otherwise only FCC_A1 and LIQUID are reported

    Parameters
    ----------
    elements : list[str] (optional)
        Defaults to ['Fe', 'C']
    temperature : float (optional)
        Temperature (K), defaults to 1200
    pressure : float (optional)
        Pressure (Pa), defaults to 101325
    composition : dict[str, float] (optional)
        Echoed in the conditions
    rng : numpy.random.Generator (optional)
    seed : int (optional)

    Returns
    -------
    EquilibriumResult
    '''
    rng = _get_rng(rng, seed)
    elements = list(elements) if elements else list(DEFAULT_ELEMENTS)
    T, P = float(temperature), float(pressure)

    a, b, c = _splitFractions(rng)
    if c > 0.1:
        names = ['FCC_A1', 'BCC_A2', 'LIQUID']
        fractions = [a, b, c]
    else:
        # Remaining fraction goes to LIQUID so the fractions still sum to 1
        names = ['FCC_A1', 'LIQUID']
        fractions = [a, b + c]

    phaseFractions = [PhaseFraction(n, float(f)) for n, f in zip(names, fractions)]
    phaseCompositions = [PhaseComposition(n, {el: round(rng.random() * 0.8 + 0.1, 3) for el in elements}) for n in names]

    properties = {
        'gibbs_energy': f'{-1 * (T / 1000) * (rng.random() * 50 + 10):.2f} kJ/mol',
        'enthalpy': f'{T * (rng.random() * 0.05 + 0.9):.0f} J/mol',
        'entropy': f'{rng.random() * 25 + 10:.2f} J/mol·K',
    }
    conditions = {'T': T, 'P': P, 'composition': {} if composition is None else dict(composition)}

    _log.debug('Generated equilibrium at %s K with phases %s', T, names)
    return EquilibriumResult(phaseFractions, phaseCompositions, properties, conditions)
