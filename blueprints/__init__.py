from .books import bp as books_bp

__all__ = ["books_bp"]
