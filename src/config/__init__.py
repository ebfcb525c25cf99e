"""Simulation configuration constants."""

from config.simulation_settings import SimulationSettings

__all__ = ['SimulationSettings']
