"""User interface packages for hierns."""
