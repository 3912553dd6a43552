import matplotlib.pyplot as plt
import pytest

from alloycalc.diffusion import computeDiffusionProfile
from alloycalc.diffusion.Plot import plotDiffusionProfile, plotDiffusionProfiles
from alloycalc.thermo import generatePhaseDiagram, generateEquilibrium
from alloycalc.thermo.Plot import plotPhaseDiagram, plotPhaseFractions
from alloycalc.PlotUtils import _adjust_kwargs

def test_diffusion_plotting():
    '''
    Checks number of lines and axis limits of diffusion profile plots
    '''
    result = computeDiffusionProfile(temperature=1200, time=3600, diffusionCoefficient=1e-12)

    fig, ax = plt.subplots()
    plotDiffusionProfile(result, element='C', ax=ax)
    assert len(ax.lines) == 1
    assert ax.lines[0].get_label() == 'C Concentration'
    assert tuple(ax.get_xlim()) == (0, 720)
    assert tuple(ax.get_ylim()) == (0, 100)
    plt.close(fig)

    fig, ax = plt.subplots()
    plotDiffusionProfile(result.toDict(), showPenetrationDepth=True, ax=ax, color='r')
    assert len(ax.lines) == 2
    plt.close(fig)

    ax = plotDiffusionProfile(result)
    assert len(ax.lines) == 1
    plt.close(ax.figure)

    with pytest.raises(ValueError):
        plotDiffusionProfile([1, 2, 3])

def test_diffusion_time_series_plotting():
    results = [computeDiffusionProfile(time=t, diffusionCoefficient=1e-12) for t in [600, 3600, 36000]]

    fig, ax = plt.subplots()
    plotDiffusionProfiles(results, ax=ax)
    assert len(ax.lines) == 3
    assert ax.lines[1].get_label() == 't = 1.00 h'
    assert ax.get_xlim()[1] == max(r.spanMicrometers for r in results)
    plt.close(fig)

    fig, ax = plt.subplots()
    with pytest.raises(ValueError):
        plotDiffusionProfiles(results, labels=['a', 'b'], ax=ax)
    plt.close(fig)

def test_phase_diagram_plotting():
    pd = generatePhaseDiagram((900, 1800), seed=0)

    fig, ax = plt.subplots()
    plotPhaseDiagram(pd, showScatter=False, ax=ax)
    assert len(ax.lines) == 2
    assert len(ax.collections) == 0
    plt.close(fig)

    fig, ax = plt.subplots()
    plotPhaseDiagram(pd, elements=['Fe', 'Ni'], ax=ax)
    assert len(ax.lines) == 2
    assert len(ax.collections) == len(set(p.phase for p in pd.scatterData))
    assert ax.get_xlabel() == 'Composition Ni (%)'
    plt.close(fig)

def test_phase_fraction_plotting():
    eq = generateEquilibrium(['Fe', 'C'], seed=4)
    fig, ax = plt.subplots()
    plotPhaseFractions(eq, ax=ax)
    assert len(ax.patches) == len(eq.phaseFractions)
    plt.close(fig)

def test_adjust_kwargs():
    '''
    Dict kwargs only apply to the matching variable and defaults are not modified
    '''
    defaults = {'label': 'liquidus'}
    merged = _adjust_kwargs('liquidus', defaults, {'color': {'liquidus': 'r', 'solidus': 'b'}, 'linewidth': 2})
    assert merged == {'label': 'liquidus', 'color': 'r', 'linewidth': 2}
    assert defaults == {'label': 'liquidus'}
    assert _adjust_kwargs('solvus', None, {'color': {'liquidus': 'r'}}) == {}
