"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases:
- MovieDetailsService: movie detail composition (catalog row + ratings)
- RatingsAggregatorService: concurrent rating sources, partial failure tolerated
- CatalogService: paginated listings and genre index

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""
