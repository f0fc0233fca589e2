"""Running pace calculator: pace conversions and race finish-time estimates."""
