"""podproxy command line interface."""
