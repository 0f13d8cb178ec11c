"""Domain helpers: record type, id policies and the resource catalogue."""
