"""cross-ci command-line entry points."""
