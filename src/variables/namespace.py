"""
Namespace — Именованные объекты и иерархические пространства имён

Namespace — словарь name → object с опциональным родителем. Полное имя
объекта строится через separator от корня:
    root.child.object
"""

from typing import Any, Dict, Final, Generic, List, Optional, Protocol, TypeVar, runtime_checkable


DEFAULT_SEPARATOR: Final[str] = "."


@runtime_checkable
class Nameable(Protocol):
    """Объект с атрибутом name"""

    @property
    def name(self) -> str: ...


T = TypeVar("T", bound=Nameable)


class Named:
    """Простейший Nameable"""

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"


class AsNameable(Named):
    """Nameable-обёртка для произвольного item"""

    def __init__(self, item: Any, name: str):
        super().__init__(name)
        self.item = item

    def __repr__(self) -> str:
        return f"AsNameable(item={self.item!r}, name={self.name!r})"


class Namespace(Named, Generic[T]):
    """
    Пространство имён для Nameable объектов.

    Объекты хранятся по name; добавление объекта с существующим именем
    перезаписывает предыдущий.
    """

    def __init__(
        self,
        name: str,
        parent: Optional["Namespace[T]"] = None,
        separator: str = DEFAULT_SEPARATOR,
    ):
        """
        Args:
            name: имя пространства
            parent: родительское пространство (None для корня)
            separator: разделитель в полных именах

        Raises:
            ValueError: если separator пустой
        """
        if not separator:
            raise ValueError("Namespace separator must be non-empty")
        super().__init__(name)
        self.parent = parent
        self.separator = separator
        self._objects: Dict[str, T] = {}

    def has_object_by_name(self, obj: Nameable) -> bool:
        return obj.name in self._objects

    def add_object_by_name(self, obj: T) -> None:
        self._objects[obj.name] = obj

    def rem_object_by_name(self, obj: Nameable) -> None:
        self._objects.pop(obj.name, None)

    def get_object_by_name(self, name: str) -> Optional[T]:
        return self._objects.get(name)

    def fullname(self, obj: Nameable) -> str:
        """
        Полное имя obj в этом пространстве. obj не обязан в нём находиться.
        """
        prefix = self.parent.fullname(self) if self.parent is not None else self.name
        return prefix + self.separator + obj.name

    def names(self) -> List[str]:
        return list(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, name: str) -> bool:
        return name in self._objects
