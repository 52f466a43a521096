"""Application services orchestrating feature use cases."""
