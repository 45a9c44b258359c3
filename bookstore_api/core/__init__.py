"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that every entity package uses
(DB wiring, settings, logging, error mapping). Keep entity-specific SQL and
validation in the corresponding package (e.g. `authors/`).
"""
