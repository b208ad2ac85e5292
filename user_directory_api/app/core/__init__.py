"""Configuration, logging setup and database access shared by all layers."""
