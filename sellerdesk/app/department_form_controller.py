from __future__ import annotations

from typing import Optional

from ..domain.entities import Department
from ..domain.ports import DepartmentService
from ..viewmodels.department_form_vm import DepartmentFormState, DepartmentFormVM
from .form_controller import EntityFormController, FormView
from .views.alerts import ShowAlert


class DepartmentFormController(EntityFormController[Department, DepartmentFormState]):
    """Department dialog orchestration: id + name, persisted via DepartmentService."""

    entity_label = "Department"

    def __init__(
        self,
        view: FormView[DepartmentFormState],
        *,
        vm: Optional[DepartmentFormVM] = None,
        alert: Optional[ShowAlert] = None,
    ) -> None:
        super().__init__(view, vm or DepartmentFormVM(), alert=alert)

    def set_department(self, entity: Department) -> None:
        self._set_entity(entity)

    def set_department_service(self, service: DepartmentService) -> None:
        self._set_service(service)
