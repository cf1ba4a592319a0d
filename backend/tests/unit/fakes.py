"""In-memory fake repositories for unit testing the application services."""

from datetime import datetime, timezone
from uuid import UUID

from app.application.interfaces import BrandRepository, ProductRepository
from app.domain.entities import Brand, BrandFilter, Product, ProductFilter
from app.domain.exceptions import EntityInUseError, EntityNotFoundError


class FakeProductRepository(ProductRepository):
    def __init__(self, brands: "FakeBrandRepository | None" = None):
        self.commits = 0
        self._products: dict[UUID, Product] = {}
        self._brands = brands

    def _live(self) -> list[Product]:
        return [p for p in self._products.values() if p.deleted_at is None]

    def _with_brand(self, product: Product) -> Product:
        brand = self._brands._brands.get(product.brand_id) if self._brands else None
        return Product(
            id=product.id,
            product_name=product.product_name,
            price=product.price,
            quantity=product.quantity,
            brand_id=product.brand_id,
            brand=brand,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    async def create(self, product: Product) -> Product:
        self._products[product.id] = product
        return product

    async def get_by_id(self, product_id: UUID) -> Product | None:
        product = self._products.get(product_id)
        if product is None or product.deleted_at is not None:
            return None
        return self._with_brand(product)

    async def get_by_name(self, name: str) -> Product | None:
        for product in self._live():
            if product.product_name == name:
                return self._with_brand(product)
        return None

    async def exists_by_id(self, product_id: UUID) -> bool:
        return await self.get_by_id(product_id) is not None

    async def exists_by_name(self, name: str) -> bool:
        return await self.get_by_name(name) is not None

    async def get_all_with_filter(
        self, product_filter: ProductFilter
    ) -> tuple[list[Product], int]:
        matches = self._live()
        if product_filter.brand_id is not None:
            matches = [p for p in matches if p.brand_id == product_filter.brand_id]
        if product_filter.min_price is not None:
            matches = [p for p in matches if p.price >= product_filter.min_price]
        if product_filter.max_price is not None:
            matches = [p for p in matches if p.price <= product_filter.max_price]
        if product_filter.min_qty is not None:
            matches = [p for p in matches if p.quantity >= product_filter.min_qty]
        if product_filter.max_qty is not None:
            matches = [p for p in matches if p.quantity <= product_filter.max_qty]
        page = matches[product_filter.offset : product_filter.offset + product_filter.limit]
        return [self._with_brand(p) for p in page], len(matches)

    async def update(self, product: Product) -> None:
        current = self._products.get(product.id)
        if current is None or current.deleted_at is not None:
            raise EntityNotFoundError("Product", product.id)
        self._products[product.id] = product

    async def delete(self, product_id: UUID) -> None:
        current = self._products.get(product_id)
        if current is None or current.deleted_at is not None:
            raise EntityNotFoundError("Product", product_id)
        current.deleted_at = datetime.now(timezone.utc)

    async def commit(self) -> None:
        self.commits += 1

    def count_for_brand(self, brand_id: UUID) -> int:
        return sum(1 for p in self._live() if p.brand_id == brand_id)


class FakeBrandRepository(BrandRepository):
    def __init__(self):
        self._brands: dict[UUID, Brand] = {}
        self.products: FakeProductRepository | None = None
        self.commits = 0

    def _live(self) -> list[Brand]:
        return [b for b in self._brands.values() if b.deleted_at is None]

    async def create(self, brand: Brand) -> Brand:
        self._brands[brand.id] = brand
        return brand

    async def get_by_id(self, brand_id: UUID) -> Brand | None:
        brand = self._brands.get(brand_id)
        if brand is None or brand.deleted_at is not None:
            return None
        return brand

    async def get_by_name(self, name: str) -> Brand | None:
        return next((b for b in self._live() if b.brand_name == name), None)

    async def exists_by_id(self, brand_id: UUID) -> bool:
        return await self.get_by_id(brand_id) is not None

    async def exists_by_name(self, name: str) -> bool:
        return await self.get_by_name(name) is not None

    async def get_all_with_filter(self, brand_filter: BrandFilter) -> tuple[list[Brand], int]:
        matches = self._live()
        if brand_filter.search:
            needle = brand_filter.search.lower()
            matches = [b for b in matches if needle in b.brand_name.lower()]
        return matches[brand_filter.offset : brand_filter.offset + brand_filter.limit], len(matches)

    async def update(self, brand: Brand) -> None:
        if await self.get_by_id(brand.id) is None:
            raise EntityNotFoundError("Brand", brand.id)
        self._brands[brand.id] = brand

    async def delete(self, brand_id: UUID) -> None:
        dependents = self.products.count_for_brand(brand_id) if self.products else 0
        if dependents:
            raise EntityInUseError("Brand", brand_id, "Product", dependents)
        brand = await self.get_by_id(brand_id)
        if brand is None:
            raise EntityNotFoundError("Brand", brand_id)
        brand.deleted_at = datetime.now(timezone.utc)

    async def commit(self) -> None:
        self.commits += 1


def make_repositories() -> tuple[FakeBrandRepository, FakeProductRepository]:
    """Brand and product fakes that see each other, like tables in one database."""
    brands = FakeBrandRepository()
    products = FakeProductRepository(brands)
    brands.products = products
    return brands, products
