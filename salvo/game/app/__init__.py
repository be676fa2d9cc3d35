"""Console-facing collaborators over the core game model."""
