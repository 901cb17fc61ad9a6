"""
HTTP surface of the periodic table API.

Modules:
    main: FastAPI application, middleware stack and error handlers
    middleware: Request context, preflight, CORS and edge cache handling
    filters: Query parameter -> SQLAlchemy statement compiler
    enrichment: Child-table lookups attached to element records
    convertors: Path convertors for symbol and name routes
    dependencies: Record store dependency

Subpackages:
    routes: Info document and element endpoints
"""
