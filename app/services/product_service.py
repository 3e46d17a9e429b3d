from typing import List
from fastapi import HTTPException, status
from app.dao.product_store import ProductStore, DuplicateProductError
from app.models.product import Product
import structlog

logger = structlog.get_logger()


class ProductService:
    def __init__(self, product_store: ProductStore):
        self.product_store = product_store

    def _not_found(self, name: str) -> HTTPException:
        logger.warning("Product not found", name=name)
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )

    def get_products(self) -> List[Product]:
        products = self.product_store.list_all()
        logger.info("Retrieved products", count=len(products))
        return products

    def get_product(self, name: str) -> Product:
        product = self.product_store.find_by_name(name)
        if product is None:
            raise self._not_found(name)
        return product

    def create_product(self, product: Product) -> Product:
        try:
            created = self.product_store.insert(product)
        except DuplicateProductError:
            logger.warning("Product already exists", name=product.name)
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Product already exists"
            )
        logger.info("Product created successfully", name=created.name, quantity=created.quantity)
        return created

    def update_product(self, name: str, quantity: int) -> Product:
        product = self.product_store.replace_quantity(name, quantity)
        if product is None:
            raise self._not_found(name)
        logger.info("Product updated successfully", name=name, quantity=quantity)
        return product

    def delete_product(self, name: str) -> Product:
        product = self.product_store.remove_by_name(name)
        if product is None:
            raise self._not_found(name)
        logger.info("Product deleted successfully", name=name)
        return product
