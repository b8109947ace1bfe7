"""Domain layer: users, lists and todos."""
