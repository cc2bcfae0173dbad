"""Domain layer: change model, deploy pipeline steps and ports."""
