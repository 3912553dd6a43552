import matplotlib.pyplot as plt

def _get_axis(ax = None):
    '''
    Returns ax, or the axis of a new figure if ax is None
    '''
    if ax is None:
        _, ax = plt.subplots()
    return ax

def _adjust_kwargs(varName, defaultKwargs = None, userKwargs = None):
    '''
    Merges user kwargs into a copy of the default kwargs

    A user kwarg given as a dict is treated as per-variable, i.e. color={'LIQUID': 'r'}
    only overrides the default color when plotting LIQUID
    '''
    merged = {} if defaultKwargs is None else dict(defaultKwargs)
    for key, value in ({} if userKwargs is None else userKwargs).items():
        if isinstance(value, dict):
            if varName in value:
                merged[key] = value[varName]
        else:
            merged[key] = value
    return merged
