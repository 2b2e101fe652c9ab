from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Union

from ..domain.errors import DbError
from ..domain.ports import DepartmentService, SellerService, UseCaseError


@dataclass
class SaveEntity:
    service: Union[DepartmentService, SellerService]

    def __call__(self, entity: Any) -> None:
        try:
            self.service.save_or_update(entity)
        except DbError as e:
            raise UseCaseError("SAVE_FAILED", str(e))
