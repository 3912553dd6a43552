import numpy as np

def _get_rng(rng = None, seed = None):
    '''
    Returns a numpy Generator

    If rng is supplied, it is used as is (seed is ignored),
    otherwise a new Generator is created from seed (fresh entropy if seed is None)
    '''
    if rng is not None:
        if not isinstance(rng, np.random.Generator):
            raise ValueError(f'rng must be a numpy.random.Generator, got {type(rng).__name__}')
        return rng
    return np.random.default_rng(seed)

def _process_temperature_range(temperatureRange, default = (900, 1800)):
    '''
    Converts a temperature range to (Tmin, Tmax)

    temperatureRange can be None, a (Tmin, Tmax) pair or a dict with 'min' and 'max' keys
    Missing bounds take the defaults
    '''
    Tmin, Tmax = default
    if temperatureRange is None:
        return float(Tmin), float(Tmax)
    if isinstance(temperatureRange, dict):
        if temperatureRange.get('min') is not None:
            Tmin = temperatureRange['min']
        if temperatureRange.get('max') is not None:
            Tmax = temperatureRange['max']
    else:
        if len(temperatureRange) != 2:
            raise ValueError(f'Temperature range must have two values (min, max), got {len(temperatureRange)}')
        Tmin, Tmax = temperatureRange
    if not (np.isfinite(Tmin) and np.isfinite(Tmax)):
        raise ValueError(f'Temperature range must be finite, got ({Tmin}, {Tmax})')
    if Tmax < Tmin:
        raise ValueError(f'Maximum temperature ({Tmax}) is lower than minimum temperature ({Tmin})')
    return float(Tmin), float(Tmax)
