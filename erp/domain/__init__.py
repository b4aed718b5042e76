"""Entity models, namespace registry and listing helpers."""
