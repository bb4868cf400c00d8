"""User record domain: model, store, service."""
