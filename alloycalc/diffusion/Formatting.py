import numbers

import numpy as np

PLACEHOLDER = '—'

def _isNumeric(value):
    return isinstance(value, (numbers.Real, np.floating, np.integer)) and not isinstance(value, bool)

def _formatOrPass(value, fmt):
    '''
    Formats value with fmt if numeric, passes strings through and
    substitutes the placeholder for anything else
    '''
    if _isNumeric(value):
        return fmt(value)
    if isinstance(value, str):
        return value
    return PLACEHOLDER

def penetrationDepthDisplay(value):
    '''
    '120.0' -> '120.0', 120.0 -> '120.0 µm', None -> '—'
    '''
    return _formatOrPass(value, lambda v: f'{v} µm')

def fluxRateDisplay(value):
    return _formatOrPass(value, lambda v: f'{v:.2f}')

def interfaceConcentrationDisplay(value):
    return _formatOrPass(value, lambda v: f'{v:.2f}%')

def elapsedTimeHoursDisplay(time):
    '''
    Time in seconds to hours with 2 decimals
    '''
    if not _isNumeric(time):
        return PLACEHOLDER
    return f'{time/3600:.2f}'

def scientificDisplay(value, digits = 2):
    '''
    Scientific notation without zero-padded exponents (9.39e-7 instead of 9.39e-07, 1.00e+0 for 1)

    Parameters
    ----------
    value : float
    digits : int
        Digits after the decimal point
    '''
    if not _isNumeric(value):
        return PLACEHOLDER
    mantissa, exponent = f'{value:.{digits}e}'.split('e')
    return f'{mantissa}e{int(exponent):+d}'

def _get(result, key, default = None):
    if result is None:
        return default
    if isinstance(result, dict):
        return result.get(key, default)
    return getattr(result, key, default)

def formatDiffusionResult(result, time = None):
    '''
    Display strings for a diffusion result

    Parameters
    ----------
    result : DiffusionResult | dict | None
        Missing fields are shown as a placeholder
    time : float (optional)
        Diffusion time (s). If None, the time in the result metadata is used

    Returns
    -------
    dict with keys penetrationDepth, fluxRate, interfaceConcentration, elapsedHours
    '''
    if time is None:
        meta = _get(result, 'meta')
        time = _get(meta, 'time')

    flux = _get(result, 'surfaceFluxMagnitude')
    return {
        'penetrationDepth': penetrationDepthDisplay(_get(result, 'penetrationDepthMicrometers')),
        'fluxRate': fluxRateDisplay(scientificDisplay(flux) if _isNumeric(flux) else flux),
        'interfaceConcentration': interfaceConcentrationDisplay(_get(result, 'interfaceConcentration')),
        'elapsedHours': elapsedTimeHoursDisplay(time),
    }
