"""Core building blocks: dimensions, enumerations, number printing and conversion transforms."""
