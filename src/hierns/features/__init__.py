"""Feature packages for hierns."""
