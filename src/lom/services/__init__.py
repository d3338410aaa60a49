"""Service layer: orchestration over the domain formulas."""
