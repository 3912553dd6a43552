from .PhaseDiagram import PhaseDiagramResult, PhaseBoundaryPoint, ScatterPoint, generatePhaseDiagram, phaseBoundaries
from .Equilibrium import EquilibriumResult, PhaseFraction, PhaseComposition, generateEquilibrium
from .Properties import PropertyResult, PropertyValue, generateProperties, propertyUnit
