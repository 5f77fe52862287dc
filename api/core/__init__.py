"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (settings, DB
pool wiring). Feature-specific SQL and business logic stay in the feature
package (e.g. `names/`).
"""
