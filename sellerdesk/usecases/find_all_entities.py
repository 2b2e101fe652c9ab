from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Union

from ..domain.errors import DbError
from ..domain.ports import DepartmentService, SellerService, UseCaseError


@dataclass
class FindAllEntities:
    service: Union[DepartmentService, SellerService]

    def __call__(self) -> List[Any]:
        try:
            return list(self.service.find_all())
        except DbError as e:
            raise UseCaseError("LOAD_FAILED", str(e))
