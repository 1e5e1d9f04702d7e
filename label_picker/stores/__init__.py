from label_picker.stores.catalog import CatalogFile, load_catalog, resolve_selected
from label_picker.stores.settings import InputSize, PickerSettings


__all__ = [
    "CatalogFile",
    "InputSize",
    "PickerSettings",
    "load_catalog",
    "resolve_selected",
]
