"""Core infrastructure: exceptions, configuration, models and service wiring."""
