from alloycalc.PlotUtils import _get_axis, _adjust_kwargs
from alloycalc.diffusion.Analytic import DiffusionResult

def _as_result(result):
    if isinstance(result, DiffusionResult):
        return result
    if isinstance(result, dict):
        return DiffusionResult.fromDict(result)
    raise ValueError('result must be a DiffusionResult or a dictionary created from DiffusionResult.toDict')

def plotDiffusionProfile(result, element=None, showPenetrationDepth=False, ax=None, *args, **kwargs):
    '''
    Plots concentration vs. distance from the interface

    Parameters
    ----------
    result : DiffusionResult | dict
    element : str (optional)
        Name of the diffusing element, used for the line label
    showPenetrationDepth : bool (optional)
        Adds a vertical line at the penetration depth
        Defaults to False
    ax : matplotlib Axis (optional)
        Will be created if None

    Returns
    -------
    matplotlib Axis
    '''
    result = _as_result(result)
    ax = _get_axis(ax)

    label = 'Concentration' if element is None else f'{element} Concentration'
    plot_kwargs = _adjust_kwargs('concentration', {'label': label}, kwargs)
    ax.plot(result.positions, result.concentrations, *args, **plot_kwargs)

    if showPenetrationDepth:
        depth_kwargs = _adjust_kwargs('penetration depth', {'color': 'k', 'linestyle': '--',
                                                            'label': f'Penetration depth ({result.penetrationDepthMicrometers} µm)'}, kwargs)
        ax.axvline(result.penetrationDepthMicrometers, **depth_kwargs)
        ax.legend()

    ax.set_xlim([0, result.spanMicrometers])
    ax.set_ylim([0, 100])
    ax.set_xlabel('Distance from Interface (µm)')
    ax.set_ylabel('Concentration (wt.%)')
    return ax

def plotDiffusionProfiles(results, labels=None, ax=None, *args, **kwargs):
    '''
    Plots several diffusion profiles on the same axis (e.g. a time series)

    Parameters
    ----------
    results : list[DiffusionResult | dict]
    labels : list[str] (optional)
        If None, profiles are labeled by diffusion time in hours
    ax : matplotlib Axis (optional)

    Returns
    -------
    matplotlib Axis
    '''
    results = [_as_result(r) for r in results]
    ax = _get_axis(ax)
    if labels is None:
        labels = [f't = {r.meta.time/3600:.2f} h' for r in results]
    if len(labels) != len(results):
        raise ValueError(f'Number of labels ({len(labels)}) does not match number of results ({len(results)})')

    for r, lab in zip(results, labels):
        plot_kwargs = _adjust_kwargs(lab, {'label': lab}, kwargs)
        ax.plot(r.positions, r.concentrations, *args, **plot_kwargs)

    if len(results) > 0:
        ax.set_xlim([0, max(r.spanMicrometers for r in results)])
    if len(results) > 1:
        ax.legend()
    ax.set_ylim([0, 100])
    ax.set_xlabel('Distance from Interface (µm)')
    ax.set_ylabel('Concentration (wt.%)')
    return ax
