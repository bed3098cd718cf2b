from .corpus import generate_expression_sources

__all__ = ["generate_expression_sources"]
