"""Core building blocks: models, errors, rendering adapters."""
