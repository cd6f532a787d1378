"""CLI commands for statuscli."""
