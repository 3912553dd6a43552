import numpy as np

from alloycalc.PlotUtils import _get_axis, _adjust_kwargs
from alloycalc.thermo.PhaseDiagram import PhaseDiagramResult
from alloycalc.thermo.Equilibrium import EquilibriumResult

def plotPhaseDiagram(result: PhaseDiagramResult, showScatter=True, elements=None, ax=None, *args, **kwargs):
    '''
    Plots liquidus and solidus lines of a phase diagram, with the scatter points if requested

    Parameters
    ----------
    result : PhaseDiagramResult
    showScatter : bool (optional)
        Defaults to True
    elements : list[str] (optional)
        Used for the composition label, the second element is taken as the solute
    ax : matplotlib Axis (optional)

    Returns
    -------
    matplotlib Axis
    '''
    ax = _get_axis(ax)
    for name, values in [('liquidus', result.liquidus), ('solidus', result.solidus)]:
        plot_kwargs = _adjust_kwargs(name, {'label': name.capitalize()}, kwargs)
        ax.plot(result.composition, values, *args, **plot_kwargs)

    if showScatter:
        for i, (phase, label) in enumerate(result.phases.items()):
            points = [p for p in result.scatterData if p.phase == phase]
            if len(points) == 0:
                continue
            ax.scatter([p.x for p in points], [p.y for p in points], s=[p.size**2 for p in points],
                       color=f'C{i+2}', alpha=0.6, label=label)

    ax.set_xlim([0, 100])
    ax.set_ylim(list(result.temperatureRange))
    solute = '' if elements is None or len(elements) < 2 else f' {elements[1]}'
    ax.set_xlabel(f'Composition{solute} (%)')
    ax.set_ylabel('Temperature (K)')
    ax.legend()
    return ax

def plotPhaseFractions(result: EquilibriumResult, ax=None, *args, **kwargs):
    '''
    Bar plot of equilibrium phase fractions

    Parameters
    ----------
    result : EquilibriumResult
    ax : matplotlib Axis (optional)

    Returns
    -------
    matplotlib Axis
    '''
    ax = _get_axis(ax)
    names = result.phases
    fractions = np.array([pf.value for pf in result.phaseFractions])
    ax.bar(names, fractions, *args, **kwargs)
    ax.set_ylim([0, 1])
    ax.set_ylabel('Phase Fraction')
    return ax
