"""Short-rate interest rate models, Monte Carlo bond pricing and a comparison command."""

__version__ = "0.1.0"
__all__ = ["models", "pricing", "simulator", "cli"]