"""Domain apps of the Homely marketplace."""
