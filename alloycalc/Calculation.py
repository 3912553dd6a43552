'''
Dispatches calculations by type and builds the records handed over for storage
'''
from enum import Enum
import logging

from alloycalc.diffusion import DiffusionParameters, DiffusionResult, computeDiffusionProfile
from alloycalc.diffusion.Formatting import _isNumeric
from alloycalc.thermo import generatePhaseDiagram, generateEquilibrium, generateProperties
from alloycalc.thermo.utils import _get_rng

_log = logging.getLogger(__name__)

class CalculationType(Enum):
    PHASE_DIAGRAM = 'phase_diagram'
    EQUILIBRIUM = 'equilibrium'
    PROPERTY = 'property'
    PRECIPITATION = 'precipitation'
    DIFFUSION = 'diffusion'

class CalculationStatus(Enum):
    PENDING = 'pending'
    RUNNING = 'running'
    COMPLETED = 'completed'
    FAILED = 'failed'

def _parseEnum(enumType, value, name):
    if isinstance(value, enumType):
        return value
    try:
        return enumType(str(value).strip().lower())
    except ValueError:
        raise ValueError(f'{name} must be one of {[e.value for e in enumType]}, got {value!r}') from None

def _formatNumber(value):
    '''
    Whole numbers are written without a decimal point or exponent (1200.0 -> 1200)
    '''
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)

def runCalculation(calculationType, elements=None, parameters=None, temperatureRange=None, temperature=None,
                   pressure=None, composition=None, rng=None, seed=None):
    '''
    Runs a calculation of the given type

    Parameters
    ----------
    calculationType : CalculationType | str
    elements : list[str] (optional)
    parameters : dict | DiffusionParameters (optional)
        For diffusion, the diffusion parameters (temperature falls back to the temperature argument)
        For properties, {'properties': list[str]}
    temperatureRange : tuple | dict (optional)
        Used by phase diagrams
    temperature : float (optional)
    pressure : float (optional)
    composition : dict[str, float] (optional)
    rng : numpy.random.Generator (optional)
        Used by the mock phase diagram, equilibrium and property generators
    seed : int (optional)

    Returns
    -------
    DiffusionResult | PhaseDiagramResult | EquilibriumResult | PropertyResult
    '''
    calculationType = _parseEnum(CalculationType, calculationType, 'Calculation type')
    parameters = {} if parameters is None else parameters
    _log.info('Running %s calculation for %s', calculationType.value, elements)

    if calculationType == CalculationType.DIFFUSION:
        if isinstance(parameters, dict):
            diffParams = {k: v for k, v in parameters.items() if k in DiffusionParameters.KEY_ALIASES}
            hasTemperature = any(v is not None for k, v in diffParams.items()
                                 if DiffusionParameters.KEY_ALIASES[k] == 'temperature')
            if not hasTemperature and temperature is not None:
                diffParams['temperature'] = temperature
            parameters = DiffusionParameters.fromDict(diffParams)
        return computeDiffusionProfile(parameters)

    rng = _get_rng(rng, seed)
    if calculationType == CalculationType.PHASE_DIAGRAM:
        return generatePhaseDiagram(temperatureRange, rng=rng)
    elif calculationType == CalculationType.EQUILIBRIUM:
        if temperature is None and temperatureRange is not None:
            Tmin = temperatureRange.get('min') if isinstance(temperatureRange, dict) else temperatureRange[0]
            temperature = Tmin
        temperature = 1200 if temperature is None else temperature
        return generateEquilibrium(elements, temperature, 101325 if pressure is None else pressure, composition, rng=rng)
    elif calculationType == CalculationType.PROPERTY:
        return generateProperties(1200 if temperature is None else temperature, parameters.get('properties', None), rng=rng)
    else:
        raise ValueError(f'No calculation is available for {calculationType.value}')

class CalculationRecord:
    '''
    Description of a calculation to be stored

    Parameters
    ----------
    calculationType : CalculationType | str
    title : str
    elements : list[str]
    temperatureRange : dict (optional)
        {'min': float, 'max': float, 'unit': str}, unit defaults to K
    pressure : float (optional)
    composition : dict[str, float] (optional)
    results : object (optional)
        Result object with toDict or a JSON compatible value
    status : CalculationStatus | str (optional)
        Defaults to pending
    projectId : str (optional)
    '''
    def __init__(self, calculationType, title, elements, temperatureRange=None, pressure=None,
                 composition=None, results=None, status=CalculationStatus.PENDING, projectId=None):
        self.calculationType = calculationType
        self.title = title
        self.elements = elements
        self.temperatureRange = temperatureRange
        self.pressure = pressure
        self.composition = composition
        self.results = results
        self.status = status
        self.projectId = projectId
        self.validate()

    def validate(self):
        '''
        Checks and normalizes the record fields

        Raises ValueError for an empty title or element list, unknown types/statuses
        or non-numeric temperatures, pressure and compositions
        '''
        self.calculationType = _parseEnum(CalculationType, self.calculationType, 'Calculation type')
        self.status = _parseEnum(CalculationStatus, self.status, 'Status')

        if not isinstance(self.title, str) or len(self.title.strip()) == 0:
            raise ValueError('Calculation title is required')
        if isinstance(self.elements, str):
            self.elements = [self.elements]
        self.elements = list(self.elements) if self.elements is not None else []
        if len(self.elements) == 0:
            raise ValueError('At least one element is required')
        if not all(isinstance(e, str) for e in self.elements):
            raise ValueError(f'Elements must be strings, got {self.elements}')

        if self.temperatureRange is not None:
            tr = dict(self.temperatureRange)
            for key in ('min', 'max'):
                if tr.get(key) is not None and not _isNumeric(tr[key]):
                    raise ValueError(f'Temperature range {key} must be a number, got {tr[key]!r}')
            tr.setdefault('unit', 'K')
            self.temperatureRange = tr

        if self.pressure is not None and not _isNumeric(self.pressure):
            raise ValueError(f'Pressure must be a number, got {self.pressure!r}')

        if self.composition is not None:
            for key, value in self.composition.items():
                if not _isNumeric(value):
                    raise ValueError(f'Composition of {key} must be a number, got {value!r}')

    def toDict(self):
        '''
        Converts record to a JSON compatible dictionary
        '''
        results = self.results.toDict() if hasattr(self.results, 'toDict') else self.results
        return {
            'project_id': self.projectId,
            'calculation_type': self.calculationType.value,
            'title': self.title,
            'elements': list(self.elements),
            'temperature_range': None if self.temperatureRange is None else dict(self.temperatureRange),
            'pressure': self.pressure,
            'composition': None if self.composition is None else dict(self.composition),
            'results': results,
            'status': self.status.value,
        }

    @classmethod
    def fromDiffusion(cls, result: DiffusionResult, elements, parameters=None, projectId=None):
        '''
        Creates a completed record from a diffusion result

        Parameters
        ----------
        result : DiffusionResult
        elements : list[str]
        parameters : DiffusionParameters | dict (optional)
            Parameters as entered, used for the stored temperature and time
            If None, the clamped values in result.meta are stored
        projectId : str (optional)
        '''
        if isinstance(parameters, dict):
            parameters = DiffusionParameters.fromDict(parameters)
        if parameters is None:
            T, time = result.meta.temperature, result.meta.time
        else:
            T, time = parameters.temperature, parameters.time
        return cls(
            calculationType=CalculationType.DIFFUSION,
            title=f'Diffusion Simulation - {"-".join(elements)} at {_formatNumber(T)}K',
            elements=elements,
            temperatureRange={'min': T, 'max': T, 'unit': 'K'},
            pressure=101325,
            composition={'time': time},
            results=result,
            status=CalculationStatus.COMPLETED,
            projectId=projectId,
        )
