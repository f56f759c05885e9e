"""Category repository."""

from accountability.models.category import Category as CategoryModel
from accountability.repositories.base import RecordRepository, requires_storage
from accountability.schemas.category import Category, CategoryUpdate


class CategoryRepository(RecordRepository):
    """Categories, ordered by name."""

    model = CategoryModel

    @requires_storage(list)
    def all(self) -> list[Category]:
        with self.storage.session() as db:
            rows = db.query(CategoryModel).order_by(CategoryModel.name.asc()).all()
            return [Category.model_validate(row) for row in rows]

    @requires_storage()
    def get(self, category_id: int) -> Category | None:
        with self.storage.session() as db:
            row = db.get(CategoryModel, category_id)
            return Category.model_validate(row) if row else None

    @requires_storage()
    def create(self, name: str, weight: float = 1.0) -> Category | None:
        """Insert a category and return it."""
        with self.storage.writing() as db:
            db_category = CategoryModel(name=name, weight=weight)
            db.add(db_category)
            db.flush()
            category = Category.model_validate(db_category)
        return category

    def update(self, category_id: int, patch: CategoryUpdate) -> bool:
        return super().update(category_id, patch)
