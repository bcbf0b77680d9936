from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..domain import Category
from .context import ServiceContext


@dataclass(slots=True)
class CategoryService:
    context: ServiceContext

    def list_categories(self) -> list[Category]:
        return list(Category)

    def parse(self, value: Category | str | None) -> Optional[Category]:
        return Category.parse(value)
