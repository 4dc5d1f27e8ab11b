"""Command-line front end for the workout generator."""
