"""Domain apps: auth, documents, health."""
