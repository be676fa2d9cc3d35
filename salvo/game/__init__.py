"""Game packages: core rules, console app and infrastructure."""
