import re
from collections import namedtuple

from alloycalc.thermo.utils import _get_rng

PropertyValue = namedtuple('PropertyValue', ['name', 'value', 'unit'])

DEFAULT_PROPERTIES = ['Gibbs energy', 'Heat capacity', 'Thermal conductivity']

# (pattern, unit, value function, decimals), first match wins
_PROPERTY_RULES = [
    (re.compile(r'gibbs|energy', re.IGNORECASE), 'kJ/mol', lambda u: u * -60 - 20, 2),
    (re.compile(r'heat capacity|cp', re.IGNORECASE), 'J/mol·K', lambda u: u * 40 + 10, 2),
    (re.compile(r'thermal', re.IGNORECASE), 'W/m·K', lambda u: u * 40 + 10, 1),
]
_FALLBACK_RULE = (None, 'SI', lambda u: u * 100, 2)

def _ruleFor(name):
    for rule in _PROPERTY_RULES:
        if rule[0].search(name):
            return rule
    return _FALLBACK_RULE

def propertyUnit(name):
    '''
    Unit for property name, 'SI' if the property is not recognized
    '''
    return _ruleFor(name)[1]

class PropertyResult:
    '''
    Attributes
    ----------
    properties : list[PropertyValue]
        Values are formatted strings
    temperature : float
    '''
    def __init__(self, properties, temperature):
        self.properties = list(properties)
        self.temperature = temperature

    def __getitem__(self, name):
        for p in self.properties:
            if p.name == name:
                return p
        raise KeyError(name)

    def toDict(self):
        return {
            'properties': [dict(p._asdict()) for p in self.properties],
            'at': {'T': self.temperature},
        }

def generateProperties(temperature = 1200, properties = None, rng = None, seed = None):
    '''
    Generates mock thermodynamic properties

    Parameters
    ----------
    temperature : float (optional)
        Defaults to 1200 K
    properties : list[str] (optional)
        Property names, defaults to Gibbs energy, heat capacity and thermal conductivity
    rng : numpy.random.Generator (optional)
    seed : int (optional)

    Returns
    -------
    PropertyResult
    '''
    rng = _get_rng(rng, seed)
    properties = DEFAULT_PROPERTIES if properties is None else properties
    if isinstance(properties, str):
        properties = [properties]

    values = []
    for name in properties:
        _, unit, func, decimals = _ruleFor(name)
        values.append(PropertyValue(name, f'{func(rng.random()):.{decimals}f}', unit))
    return PropertyResult(values, float(temperature))
