"""Service Layer - async registries that sequence store IO around core/ transforms."""
