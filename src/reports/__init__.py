"""Run journals produced by the solver."""
