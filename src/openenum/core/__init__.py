"""Core types and services for openenum: definitions, naming, type resolution, errors."""
