"""
Тесты Namespace

Проверяет:
1. Добавление / удаление / поиск объектов по имени
2. fullname в иерархии пространств
3. Nameable protocol
"""

import pytest

from src.variables.namespace import (
    DEFAULT_SEPARATOR,
    AsNameable,
    Nameable,
    Named,
    Namespace,
)


@pytest.fixture
def hierarchy():
    root = Namespace("root")
    child = Namespace("child", parent=root)
    return root, child


class TestNamespace:
    """Тесты Namespace"""

    def test_add_get_remove(self) -> None:
        """Объекты хранятся по name"""
        namespace = Namespace("ns")
        obj = Named("speed")

        assert not namespace.has_object_by_name(obj)

        namespace.add_object_by_name(obj)
        assert namespace.has_object_by_name(obj)
        assert namespace.get_object_by_name("speed") is obj
        assert "speed" in namespace
        assert len(namespace) == 1

        namespace.rem_object_by_name(obj)
        assert not namespace.has_object_by_name(obj)
        assert namespace.get_object_by_name("speed") is None

    def test_same_name_replaces(self) -> None:
        """Объект с тем же name перезаписывает предыдущий"""
        namespace = Namespace("ns")
        first = Named("x")
        second = Named("x")

        namespace.add_object_by_name(first)
        namespace.add_object_by_name(second)

        assert len(namespace) == 1
        assert namespace.get_object_by_name("x") is second

    def test_remove_missing_is_noop(self) -> None:
        """Удаление отсутствующего объекта не ошибка"""
        namespace = Namespace("ns")

        namespace.rem_object_by_name(Named("absent"))

        assert namespace.names() == []

    def test_fullname(self, hierarchy) -> None:
        """fullname строится от корня"""
        root, child = hierarchy
        obj = Named("value")

        assert root.fullname(obj) == "root.value"
        assert child.fullname(obj) == "root.child.value"

    def test_custom_separator(self) -> None:
        """Пользовательский separator"""
        root = Namespace("a", separator="/")
        child = Namespace("b", parent=root, separator="/")

        assert child.fullname(Named("c")) == "a/b/c"

    def test_empty_separator(self) -> None:
        """Пустой separator → ValueError"""
        with pytest.raises(ValueError, match="separator must be non-empty"):
            Namespace("ns", separator="")

    def test_default_separator(self) -> None:
        """Separator по умолчанию"""
        assert Namespace("ns").separator == DEFAULT_SEPARATOR


class TestNameable:
    """Тесты Nameable"""

    def test_named_is_nameable(self) -> None:
        """Named и Namespace удовлетворяют Nameable"""
        assert isinstance(Named("x"), Nameable)
        assert isinstance(Namespace("ns"), Nameable)

    def test_variable_is_nameable(self) -> None:
        """Variable хранится в Namespace"""
        from src.core.algebra.domain import AlwaysDomain
        from src.variables.variable import Variable

        variable = Variable(name="altitude", time=0, value=1, domain=AlwaysDomain(result=True))
        namespace = Namespace("vehicle")
        namespace.add_object_by_name(variable)

        assert isinstance(variable, Nameable)
        assert namespace.fullname(variable) == "vehicle.altitude"
        assert namespace.get_object_by_name("altitude") is variable


class TestAsNameable:
    """Тесты AsNameable"""

    def test_wraps_item(self) -> None:
        """Произвольный item получает name"""
        item = {"unit": "m/s"}
        wrapped = AsNameable(item, "speed")

        assert isinstance(wrapped, Nameable)
        assert wrapped.name == "speed"
        assert wrapped.item is item

    def test_stored_in_namespace(self) -> None:
        """AsNameable хранится в Namespace по name"""
        namespace = Namespace("sensors")
        wrapped = AsNameable(42, "answer")

        namespace.add_object_by_name(wrapped)

        assert namespace.get_object_by_name("answer").item == 42
        assert namespace.fullname(wrapped) == "sensors.answer"
