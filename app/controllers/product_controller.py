from fastapi import APIRouter, Depends, Query, Request
from app.core.responses import NewlineJSONResponse
from app.services.product_service import ProductService
from app.models.product import Product, ProductQuantityUpdate, ProductDeleteRequest
from typing import List
import structlog

logger = structlog.get_logger()

router = APIRouter(tags=["Products"], default_response_class=NewlineJSONResponse)


def get_product_service(request: Request) -> ProductService:
    return ProductService(request.app.state.product_store)


@router.get("/products", response_model=List[Product])
async def get_products(service: ProductService = Depends(get_product_service)):
    """List every product in insertion order"""
    return service.get_products()


@router.get("/product", response_model=Product)
async def get_product(
    name: str = Query(...),
    service: ProductService = Depends(get_product_service)
):
    """Get a single product by its exact name"""
    return service.get_product(name)


@router.post("/product", response_model=Product)
async def create_product(
    product: Product,
    service: ProductService = Depends(get_product_service)
):
    """Create a product and echo it back"""
    return service.create_product(product)


@router.put("/product", response_model=Product)
async def update_product(
    product_update: ProductQuantityUpdate,
    service: ProductService = Depends(get_product_service)
):
    """Replace the quantity of the product with the given name"""
    return service.update_product(product_update.name, product_update.quantity)


@router.delete("/product", response_model=Product)
async def delete_product(
    product_delete: ProductDeleteRequest,
    service: ProductService = Depends(get_product_service)
):
    """Delete the product with the given name and return it as it was stored"""
    return service.delete_product(product_delete.name)
