'''
Items package: the immutable item value and its category tag.
'''
from .model import Item, ItemType, ring, weapon

__all__ = [
    'Item',
    'ItemType',
    'ring',
    'weapon',
]
