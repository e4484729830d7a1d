"""Task entity, list state and saved-state bundles."""
