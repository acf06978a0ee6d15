"""Service layer: prompt engine (resolver, composer, parser) and boundary services."""
