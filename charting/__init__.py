"""Configuration, snapshot and reporting glue for the `charts` package."""
