"""Makes the minicc package importable when running pytest from a checkout."""
