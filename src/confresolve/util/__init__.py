"""Small helpers used across confresolve."""
