"""Chart geometry: projections, layouts, series data, line paths, markers, legends and tooltips."""

__version__ = "0.1.0"