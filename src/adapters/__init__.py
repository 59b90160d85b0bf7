"""Output adapters (serialization of domain models)."""
