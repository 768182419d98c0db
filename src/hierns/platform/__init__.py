"""Platform integrations (logging) for hierns."""
