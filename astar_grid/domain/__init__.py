"""Framework-agnostic pathfinding core: grid model, estimators, frontier and A*."""
