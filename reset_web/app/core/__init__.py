"""Configuration, logging, session storage, navigation and timers."""
