from .debounce import Debounced, Debouncer, debounce

__all__ = ["Debounced", "Debouncer", "debounce"]
