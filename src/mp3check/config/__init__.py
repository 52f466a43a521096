"""Configuration: portable paths, the TOML-backed ``Config`` and fixed settings."""
