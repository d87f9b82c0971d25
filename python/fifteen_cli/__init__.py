"""Terminal front end for the fifteen solver."""
