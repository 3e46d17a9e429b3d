# Import all models for easy access
from .product import Product, ProductQuantityUpdate, ProductDeleteRequest
