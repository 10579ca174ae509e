"""Command modules for the TaskCadence CLI."""
