"""Domain rules and value objects for officer filing validation."""
