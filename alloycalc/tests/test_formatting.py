import numpy as np

from alloycalc.diffusion import computeDiffusionProfile
from alloycalc.diffusion import penetrationDepthDisplay, fluxRateDisplay, interfaceConcentrationDisplay, elapsedTimeHoursDisplay
from alloycalc.diffusion import scientificDisplay, formatDiffusionResult

def test_numeric_display():
    assert penetrationDepthDisplay(120.0) == '120.0 µm'
    assert penetrationDepthDisplay(np.float64(35.5)) == '35.5 µm'
    assert fluxRateDisplay(1.234) == '1.23'
    assert interfaceConcentrationDisplay(0) == '0.00%'
    assert interfaceConcentrationDisplay(9.386) == '9.39%'
    assert elapsedTimeHoursDisplay(3600) == '1.00'
    assert elapsedTimeHoursDisplay(5400) == '1.50'

def test_string_passthrough():
    '''
    Pre-formatted strings are passed through unchanged
    '''
    assert penetrationDepthDisplay('120.0') == '120.0'
    assert fluxRateDisplay('1.2× baseline') == '1.2× baseline'
    assert interfaceConcentrationDisplay('45.00') == '45.00'

def test_missing_values():
    '''
    Missing values are replaced by a placeholder
    '''
    assert penetrationDepthDisplay(None) == '—'
    assert fluxRateDisplay(None) == '—'
    assert interfaceConcentrationDisplay(None) == '—'
    assert elapsedTimeHoursDisplay(None) == '—'
    assert elapsedTimeHoursDisplay('1 hour') == '—'
    assert fluxRateDisplay(True) == '—'

def test_scientific_display():
    assert scientificDisplay(9.4031e-7) == '9.40e-7'
    assert scientificDisplay(1) == '1.00e+0'
    assert scientificDisplay(12345) == '1.23e+4'
    assert scientificDisplay(-2.5e-12, digits=1) == '-2.5e-12'
    assert scientificDisplay(None) == '—'

def test_format_result():
    '''
    Display strings for the reference scenario
    '''
    result = computeDiffusionProfile(temperature=1200, time=3600, diffusionCoefficient=1e-12, interfaceOffset=0)
    expected = {
        'penetrationDepth': '120.0 µm',
        'fluxRate': '9.40e-7',
        'interfaceConcentration': '0.00%',
        'elapsedHours': '1.00',
    }
    assert formatDiffusionResult(result) == expected
    assert formatDiffusionResult(result.toDict()) == expected
    assert formatDiffusionResult(result, time=7200)['elapsedHours'] == '2.00'

def test_format_partial_result():
    '''
    Absent or partial results are formatted with placeholders
    '''
    empty = formatDiffusionResult(None)
    assert all(v == '—' for v in empty.values())

    partial = formatDiffusionResult({'penetrationDepthMicrometers': 12.3, 'surfaceFluxMagnitude': '1.2× baseline'})
    assert partial['penetrationDepth'] == '12.3 µm'
    assert partial['fluxRate'] == '1.2× baseline'
    assert partial['interfaceConcentration'] == '—'
    assert partial['elapsedHours'] == '—'
