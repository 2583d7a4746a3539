"""Root finding, integration, ODE, linear-system, interpolation and fitting methods, and CPU scheduling simulations."""

__version__ = "0.1.0"