"""Core configuration logic: verbosity lattice, option table, settings and logging."""
