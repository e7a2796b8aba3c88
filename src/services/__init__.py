"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
Each public operation runs inside one unit of work: all reads and writes
commit together, or none do.

This layer contains:
- OrderService: create, read and ship orders
- LineService: add lines to open orders
- CatalogImporter: seed clients and products from JSON

Services depend on ports (interfaces) from core/, never on concrete
implementations from infrastructure/.
"""
