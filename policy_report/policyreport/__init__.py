"""Plain-text reports for YAML, Kubernetes schema and policy validation results."""

__version__ = "0.1.0"
