"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They coordinate between entities and catalog stores.

This layer contains:
- Input validation (MediaValidator)
- Query engine: search, filter pipeline and rating sort
- LibraryService: unified view over the book, movie and series catalogs
"""
