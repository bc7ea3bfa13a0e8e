"""Settings, logging, storage and clock helpers shared by the application."""
