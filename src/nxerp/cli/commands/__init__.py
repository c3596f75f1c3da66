"""CLI command groups, one per master-data entity."""
