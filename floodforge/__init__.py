"""Rain World map editing helpers: creatures, dens, regions, popups, markdown and physics."""

__version__ = "1.5.5"