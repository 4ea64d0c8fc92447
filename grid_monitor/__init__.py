"""grid_monitor
=================

Spectator overlay for grid-based multi-agent simulations.

The package projects immutable world snapshots (see :mod:`grid_monitor.world`)
plus the spectator's selection (see :mod:`grid_monitor.selection`) into a
declarative view tree (see :mod:`grid_monitor.view`). The single entry point is
:func:`grid_monitor.overlay.render`.
"""

from grid_monitor.overlay import Controller, render

__all__ = ["Controller", "render"]
