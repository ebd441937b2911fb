"""Pure personal-finance calculators. No I/O beyond the config module."""
