"""Configuration loading and path resolution for hierns."""
