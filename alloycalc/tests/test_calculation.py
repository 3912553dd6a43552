import numpy as np
import pytest

from alloycalc.Calculation import runCalculation, CalculationType, CalculationStatus, CalculationRecord
from alloycalc.diffusion import DiffusionResult, DiffusionParameters, computeDiffusionProfile
from alloycalc.thermo import PhaseDiagramResult, EquilibriumResult, PropertyResult

def test_dispatch_types():
    '''
    Each calculation type returns its result object
    '''
    elements = ['Fe', 'C']
    assert isinstance(runCalculation('diffusion', elements), DiffusionResult)
    assert isinstance(runCalculation(CalculationType.PHASE_DIAGRAM, elements, seed=1), PhaseDiagramResult)
    assert isinstance(runCalculation('equilibrium', elements, seed=1), EquilibriumResult)
    assert isinstance(runCalculation('PROPERTY', elements, seed=1), PropertyResult)

    with pytest.raises(ValueError):
        runCalculation('precipitation', elements)
    with pytest.raises(ValueError):
        runCalculation('scheil', elements)

def test_diffusion_from_form_parameters():
    '''
    Form parameters are converted to diffusion parameters, ignoring keys for other calculations
    '''
    parameters = {
        'temperature': 1200,
        'time': 3600,
        'interface_position': 0,
        'diffusion_coefficient': 1e-12,
        'boundary_conditions': 'fixed',
        'properties': ['Gibbs energy'],
    }
    result = runCalculation('diffusion', ['Fe', 'C'], parameters=parameters)
    assert result == computeDiffusionProfile(DiffusionParameters(1200, 3600, 1e-12, 0, 'fixed'))

    # Temperature falls back to the temperature argument
    result = runCalculation('diffusion', ['Fe', 'C'], parameters={'time': 60}, temperature=900)
    assert result.meta.temperature == 900
    assert result.meta.time == 60

    params = DiffusionParameters(time=7200)
    assert runCalculation('diffusion', parameters=params) == computeDiffusionProfile(params)

def test_dispatch_arguments():
    '''
    Temperatures, pressure and property names are forwarded to the generators
    '''
    eq = runCalculation('equilibrium', ['Ni', 'Cr'], temperatureRange={'min': 1000, 'max': 1400},
                        composition={'Cr': 0.2}, seed=3)
    assert eq.conditions['T'] == 1000
    assert eq.conditions['P'] == 101325
    assert eq.conditions['composition'] == {'Cr': 0.2}

    eq = runCalculation('equilibrium', ['Ni', 'Cr'], temperature=1300, pressure=2e5, seed=3)
    assert eq.conditions['T'] == 1300
    assert eq.conditions['P'] == 2e5

    prop = runCalculation('property', parameters={'properties': ['Heat capacity']}, temperature=800, seed=3)
    assert prop.temperature == 800
    assert [p.name for p in prop.properties] == ['Heat capacity']

    pd = runCalculation('phase_diagram', temperatureRange=(500, 1000), seed=3)
    assert pd.temperatureRange == (500, 1000)
    assert pd.phaseData[0].liquidus == 1000

def test_dispatch_reproducible():
    r1 = runCalculation('equilibrium', ['Fe', 'C'], rng=np.random.default_rng(5))
    r2 = runCalculation('equilibrium', ['Fe', 'C'], seed=5)
    assert r1.toDict() == r2.toDict()

def test_diffusion_record():
    '''
    Record created after a diffusion simulation
    '''
    result = computeDiffusionProfile(temperature=1200, time=3600, diffusionCoefficient=1e-12)
    record = CalculationRecord.fromDiffusion(result, ['Fe', 'C'])
    data = record.toDict()
    assert data['calculation_type'] == 'diffusion'
    assert data['title'] == 'Diffusion Simulation - Fe-C at 1200K'
    assert data['elements'] == ['Fe', 'C']
    assert data['temperature_range'] == {'min': 1200, 'max': 1200, 'unit': 'K'}
    assert data['pressure'] == 101325
    assert data['composition'] == {'time': 3600}
    assert data['status'] == 'completed'
    assert data['project_id'] is None
    assert data['results'] == result.toDict()

def test_record_validation():
    '''
    Records require a title, at least one element and known type/status
    '''
    record = CalculationRecord('equilibrium', 'Ni-Cr equilibrium', 'Ni')
    assert record.elements == ['Ni']
    assert record.status == CalculationStatus.PENDING
    assert record.toDict()['results'] is None

    record = CalculationRecord('phase_diagram', 'Al-Cu', ['Al', 'Cu'], temperatureRange={'min': 500, 'max': 900})
    assert record.temperatureRange['unit'] == 'K'

    invalid = [
        dict(calculationType='diffusion', title='', elements=['Fe']),
        dict(calculationType='diffusion', title='Fe', elements=[]),
        dict(calculationType='diffusion', title='Fe', elements=[26]),
        dict(calculationType='sintering', title='Fe', elements=['Fe']),
        dict(calculationType='diffusion', title='Fe', elements=['Fe'], status='done'),
        dict(calculationType='diffusion', title='Fe', elements=['Fe'], pressure='1 atm'),
        dict(calculationType='diffusion', title='Fe', elements=['Fe'], temperatureRange={'min': 'cold'}),
        dict(calculationType='diffusion', title='Fe', elements=['Fe'], composition={'C': '0.2'}),
    ]
    for kwargs in invalid:
        with pytest.raises(ValueError):
            CalculationRecord(**kwargs)

def test_diffusion_temperature_alias():
    '''
    A temperature given under any accepted key takes precedence over the temperature argument
    '''
    result = runCalculation('diffusion', ['Fe', 'C'], parameters={'T': 900}, temperature=1500)
    assert result.meta.temperature == 900

    result = runCalculation('diffusion', ['Fe', 'C'], parameters={'T': None}, temperature=1500)
    assert result.meta.temperature == 1500

def test_diffusion_record_entered_parameters():
    '''
    Record stores the entered time and temperature rather than the clamped values
    '''
    parameters = {'temperature': 1234567, 'time': 0, 'diffusion_coefficient': 1e-12}
    result = computeDiffusionProfile(parameters)
    assert result.meta.time == 1

    data = CalculationRecord.fromDiffusion(result, ['Fe', 'C'], parameters=parameters).toDict()
    assert data['composition'] == {'time': 0}
    assert data['title'] == 'Diffusion Simulation - Fe-C at 1234567K'

    data = CalculationRecord.fromDiffusion(result, ['Fe', 'C'], DiffusionParameters(temperature=1200.5)).toDict()
    assert data['title'] == 'Diffusion Simulation - Fe-C at 1200.5K'

    # Without parameters the clamped values of the result are stored
    data = CalculationRecord.fromDiffusion(result, ['Fe', 'C']).toDict()
    assert data['composition'] == {'time': 1}

def test_record_numpy_values():
    '''
    Numpy scalars are accepted as numbers, booleans are not
    '''
    record = CalculationRecord('equilibrium', 'Ni-Cr', ['Ni', 'Cr'], temperatureRange={'min': np.int64(1000), 'max': np.float64(1400)},
                               pressure=np.int64(101325), composition={'Cr': np.float32(0.2)})
    assert record.pressure == 101325

    with pytest.raises(ValueError):
        CalculationRecord('equilibrium', 'Ni-Cr', ['Ni', 'Cr'], pressure=True)
