"""Top-level package for the urban network planner.

This package exposes the algorithmic core used to analyse a city's
road network: the graph model and traffic table (``graph``), the
shortest-path and spanning-tree algorithms built on them, and the
knapsack-based allocation optimizers (``optimization``). Loading,
reporting and rendering live in ``adapters``, ``services`` and
``pipeline``.
"""
