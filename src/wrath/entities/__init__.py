from wrath.entities.shape import Shape

__all__ = ['Shape']
