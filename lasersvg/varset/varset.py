from typing import Any, Dict, Iterator, Optional
from .var import Var


class VarSet:
    """
    An ordered collection of Vars, e.g. all settings of a driver.
    """

    def __init__(self, title: Optional[str] = None):
        self.title = title
        self._vars: Dict[str, Var] = {}

    def add(self, var: Var) -> Var:
        if var.key in self._vars:
            raise KeyError(f"Duplicate key '{var.key}' in VarSet")
        self._vars[var.key] = var
        return var

    def __getitem__(self, key: str) -> Var:
        return self._vars[key]

    def __contains__(self, key: str) -> bool:
        return key in self._vars

    def __iter__(self) -> Iterator[Var]:
        return iter(self._vars.values())

    def __len__(self) -> int:
        return len(self._vars)

    def keys(self):
        return self._vars.keys()

    def get(self, key: str) -> Optional[Var]:
        return self._vars.get(key)

    def get_by_label(self, label: str) -> Optional[Var]:
        for var in self._vars.values():
            if var.label == label:
                return var
        return None

    def get_values(self) -> Dict[str, Any]:
        return {key: var.value for key, var in self._vars.items()}

    def set_values(self, values: Dict[str, Any]) -> None:
        """
        Applies the given key/value pairs. Unknown keys raise KeyError
        before any value is changed.
        """
        unknown = set(values) - set(self._vars)
        if unknown:
            raise KeyError(f"Unknown keys: {', '.join(sorted(unknown))}")
        for key, value in values.items():
            self._vars[key].value = value

    def __repr__(self) -> str:
        return f"VarSet(title={self.title!r}, vars={list(self._vars)})"
