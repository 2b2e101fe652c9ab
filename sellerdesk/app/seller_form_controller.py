"""Controller for the seller dialog.

Adds the department lookup on top of the shared form workflow: the selector is
filled from ``DepartmentService.find_all`` and shows each department by name.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from ..domain.entities import Department, Seller
from ..domain.errors import StateError
from ..domain.ports import DepartmentService, SellerService, UseCaseError
from ..usecases.find_all_entities import FindAllEntities
from ..viewmodels.seller_form_vm import SellerFormState, SellerFormVM
from .form_controller import EntityFormController, FormView
from .views.alerts import AlertType, ShowAlert


class SellerFormView(FormView[SellerFormState], Protocol):
    def set_departments(
        self, departments: List[Department], selected: Optional[Department]
    ) -> None: ...


class SellerFormController(EntityFormController[Seller, SellerFormState]):
    """Seller dialog orchestration: fields, department selector, persistence."""

    entity_label = "Seller"
    load_error_title = "Error loading departments"

    def __init__(
        self,
        view: SellerFormView,
        *,
        vm: Optional[SellerFormVM] = None,
        alert: Optional[ShowAlert] = None,
    ) -> None:
        vm = vm or SellerFormVM()
        super().__init__(view, vm, alert=alert)
        self.view: SellerFormView = view
        self.vm: SellerFormVM = vm
        self._find_departments: Optional[FindAllEntities] = None

    def set_seller(self, entity: Seller) -> None:
        self._set_entity(entity)

    def set_services(
        self,
        service: SellerService,
        department_service: Optional[DepartmentService],
    ) -> None:
        self._set_service(service)
        self._find_departments = (
            FindAllEntities(department_service) if department_service is not None else None
        )

    def load_associated_objects(self) -> None:
        """Fill the department selector; without a department on the entity the first one is shown."""
        if self._find_departments is None:
            raise StateError("DepartmentService is null")
        try:
            departments = self._find_departments()
        except UseCaseError as err:
            self._log.warning("Loading departments failed: %s", err.message)
            self._alert(self.load_error_title, None, err.message, AlertType.ERROR)
            return
        if self._entity is not None and self._entity.department is not None:
            self.vm.state.department = self._entity.department
        selected = self.vm.set_departments(departments)
        self._log.debug("Loaded %d department(s) for seller form", len(departments))
        self.view.set_departments(list(self.vm.departments), selected)
