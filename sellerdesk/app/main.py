# sellerdesk/app/main.py
from __future__ import annotations
import logging
import os
from functools import partial
from typing import Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.entity_list_view import EntityListView
from .views.department_form_dialog import DepartmentFormDialog
from .views.seller_form_dialog import SellerFormDialog
from .views.alerts import AlertType, show_alert
from .views.theme import apply_theme

# ---- Controllers ----
from .department_form_controller import DepartmentFormController
from .seller_form_controller import SellerFormController
from .list_controller import EntityListController

# ---- ViewModels ----
from ..viewmodels.department_form_vm import DepartmentFormVM
from ..viewmodels.seller_form_vm import SellerFormVM
from ..viewmodels.entity_list_vm import (
    DEPARTMENT_COLUMNS,
    SELLER_COLUMNS,
    EntityListVM,
    department_row,
    seller_row,
)
from ..viewmodels.form_config import FormConfig

# ---- Domain, UseCases & Adapters ----
from ..domain.entities import Department, Seller
from ..domain.ports import DataChangeListener, DepartmentService, SellerService
from ..usecases.find_all_entities import FindAllEntities
from ..adapters.memory_services import InMemoryDepartmentService, InMemorySellerService
from ..adapters.storage_local import StorageLocal
from ..utils import logging as logging_utils

logging_utils.configure_root()


class App:
    """Bootstrap: wire list views and form dialogs to controllers and services."""

    def __init__(
        self,
        *,
        department_service: Optional[DepartmentService] = None,
        seller_service: Optional[SellerService] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.win = MainWindowView(on_about=self._on_about)
        apply_theme(self.win)

        # ---- LocalStorage Adapter ----
        self._storage_root = os.environ.get("SELLERDESK_STORAGE_ROOT") or "."
        self._storage = StorageLocal(root_dir=self._storage_root)
        self.form_config = FormConfig()
        settings_ok = self._load_form_settings()

        # ---- Services ----
        self.department_service = department_service or InMemoryDepartmentService(
            seed=_demo_departments()
        )
        self.seller_service = seller_service or InMemorySellerService()

        # ---- Lists ----
        self.seller_list_view = EntityListView(
            self.win.tab_sellers,
            title="Sellers",
            columns=SELLER_COLUMNS,
            on_new=lambda: self.seller_list.on_new(),
            on_edit=lambda index: self.seller_list.on_edit(index),
        )
        self.win.mount_list(self.seller_list_view)
        self.seller_list: EntityListController[Seller] = EntityListController(
            view=self.seller_list_view,
            vm=EntityListVM(columns=SELLER_COLUMNS, to_row=seller_row, config=self.form_config),
            find_all=FindAllEntities(self.seller_service),
            open_form=self._open_seller_form,
            new_entity=Seller,
            entity_label="Seller",
        )

        self.department_list_view = EntityListView(
            self.win.tab_departments,
            title="Departments",
            columns=DEPARTMENT_COLUMNS,
            on_new=lambda: self.department_list.on_new(),
            on_edit=lambda index: self.department_list.on_edit(index),
        )
        self.win.mount_list(self.department_list_view)
        self.department_list: EntityListController[Department] = EntityListController(
            view=self.department_list_view,
            vm=EntityListVM(
                columns=DEPARTMENT_COLUMNS, to_row=department_row, config=self.form_config
            ),
            find_all=FindAllEntities(self.department_service),
            open_form=self._open_department_form,
            new_entity=Department,
            entity_label="Department",
        )

        self.seller_list.refresh()
        self.department_list.refresh()
        if settings_ok:
            self.win.show_toast("Ready.")

    def _load_form_settings(self) -> bool:
        """Apply persisted form settings; returns False when the defaults had to be used."""
        loaded = True
        try:
            payload = self._storage.load_form_settings()
            self.form_config = FormConfig.from_dict(payload)
        except (OSError, ValueError) as exc:
            loaded = False
            self._log.warning("Using default form settings: %s", exc)
            self.win.show_toast(f"Could not load form settings: {exc}")
        level = logging_utils.apply_preferences(self.form_config.debug_logging)
        self._log.debug(
            "Form settings from %s (log level %s)",
            self._storage.settings_path,
            logging_utils.level_name(level),
        )
        return loaded

    # ==================================================================
    # Form dialogs
    # ==================================================================
    def _open_department_form(self, entity: Department, on_changed: DataChangeListener) -> None:
        controller: Optional[DepartmentFormController] = None

        def handle_close() -> None:
            if controller is not None:
                controller.clear_listeners()

        dialog = DepartmentFormDialog(
            self.win,
            config=self.form_config,
            on_save=lambda: controller.on_save(),
            on_cancel=lambda: controller.on_cancel(),
            on_close=handle_close,
        )
        controller = DepartmentFormController(
            dialog,
            vm=DepartmentFormVM(config=self.form_config),
            alert=partial(show_alert, parent=dialog),
        )
        controller.set_department(entity)
        controller.set_department_service(self.department_service)
        controller.subscribe_data_change_listener(on_changed)
        # seller rows show department names
        controller.subscribe_data_change_listener(self.seller_list.refresh)
        controller.subscribe_data_change_listener(lambda: self.win.show_toast("Department saved."))
        controller.update_form_data()

    def _open_seller_form(self, entity: Seller, on_changed: DataChangeListener) -> None:
        controller: Optional[SellerFormController] = None

        def handle_close() -> None:
            if controller is not None:
                controller.clear_listeners()

        dialog = SellerFormDialog(
            self.win,
            config=self.form_config,
            on_save=lambda: controller.on_save(),
            on_cancel=lambda: controller.on_cancel(),
            on_close=handle_close,
        )
        controller = SellerFormController(
            dialog,
            vm=SellerFormVM(config=self.form_config),
            alert=partial(show_alert, parent=dialog),
        )
        controller.set_seller(entity)
        controller.set_services(self.seller_service, self.department_service)
        controller.subscribe_data_change_listener(on_changed)
        controller.subscribe_data_change_listener(lambda: self.win.show_toast("Seller saved."))
        controller.load_associated_objects()
        controller.update_form_data()

    # ==================================================================
    # Menu actions
    # ==================================================================
    def _on_about(self) -> None:
        show_alert(
            "About",
            None,
            "Seller & Department Registry\nDesktop registration of sellers and departments.",
            AlertType.INFORMATION,
            parent=self.win,
        )


def _demo_departments() -> list[Department]:
    return [
        Department(name="Computers"),
        Department(name="Electronics"),
        Department(name="Fashion"),
        Department(name="Books"),
    ]


def main() -> None:
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
