"""Configuration, paths, and theming for clean-repo."""
