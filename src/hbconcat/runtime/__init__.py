"""Engine wiring for hbconcat."""
