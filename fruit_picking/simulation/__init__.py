"""
Simulation Package
==================

Random harvest harness built on the picking core.
"""

from fruit_picking.simulation.run_sim import run_harvest, run_harvests

__all__ = ["run_harvest", "run_harvests"]
